from collections import deque

from accumtools import Iter
from accumtools._base import count_of, size_hint_of
from accumtools._utils import count_items, iter_size_hint


def test_count_items():
    assert count_items(iter([])) == 0
    assert count_items(iter([1, None, 3])) == 3
    assert count_items(i for i in range(1000)) == 1000

    iterator = iter(range(10))
    next(iterator)
    assert count_items(iterator) == 9
    assert count_items(iterator) == 0


def test_iter_size_hint():
    exact_cases = [
        ([1, 2, 3], 3),
        (reversed([1, 2]), 2),
        ((1,), 1),
        (range(4), 4),
        ("abc", 3),
        ("ñandú", 5),
        (b"ab", 2),
        (bytearray(b"a"), 1),
        ({"a": 1}, 1),
        ({"a": 1, "b": 2}.values(), 2),
        ({"a": 1}.items(), 1),
        ({1, 2}, 2),
    ]
    for iterable, expected in exact_cases:
        assert iter_size_hint(iter(iterable)) == (expected, expected)

    assert iter_size_hint(i for i in range(3)) == (0, None)
    assert iter_size_hint(iter(deque([1, 2]))) == (2, None)

    class Hinted:
        def __iter__(self):
            return self

        def __next__(self):
            raise StopIteration

        def __length_hint__(self):
            return 7

    assert iter_size_hint(Hinted()) == (7, None)


def test_delegation_to_base_iter():
    wrapped = Iter(range(5))
    assert size_hint_of(wrapped) == (5, 5)
    assert count_of(wrapped) == 5
    assert size_hint_of(wrapped) == (0, 0)

    generator = (i for i in range(3))
    assert size_hint_of(generator) == (0, None)
    assert count_of(generator) == 3


def test_iter_wrapper():
    wrapped = Iter([1, 2, 3])
    assert iter(wrapped) is wrapped
    assert list(wrapped) == [1, 2, 3]
    assert Iter("abc").fold("", lambda acc, s: s + acc) == "cba"
    assert Iter([]).fold(1, lambda acc, i: acc * i) == 1
    result = Iter([1, 2, 3, 4, 5]).running_fold(1, lambda a, i: a * i)
    assert list(result) == [1, 2, 6, 24, 120]
