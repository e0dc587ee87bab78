"""Base iterator adaptor and the passthrough :py:obj:`Iter` wrapper."""
import typing as t
from copy import copy
from functools import reduce

from ._utils import count_items, iter_size_hint


if t.TYPE_CHECKING:
    from ._running_fold import RunningFold


T = t.TypeVar("T")
B = t.TypeVar("B")


class BaseIter(t.Iterator[T]):
    """Base class of iterators provided by the package.

    Every subclass is an iterator which can tell how many items it has left
    and exposes chainable adaptors:

    >>> from operator import add
    >>> list(Iter([1, 2, 3]).running_fold(0, add).running_fold(0, add))
    [1, 4, 10]
    """

    __slots__ = ()

    def __iter__(self):
        return self

    def __next__(self) -> T:
        raise NotImplementedError

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def size_hint(self) -> t.Tuple[int, t.Optional[int]]:
        """Return a lower bound and an optional upper bound of the number of
        items left."""
        return 0, None

    def count(self) -> int:
        """Consume the iterator, returning the number of items left."""
        return count_items(self)

    def running_fold(
        self, initial: B, combine: t.Callable[[B, T], B]
    ) -> "RunningFold[T, B]":
        """Lazily yield running combinations of items, see
        :py:obj:`RunningFold`."""
        from ._running_fold import (  # pylint: disable=import-outside-toplevel
            RunningFold,
        )

        return RunningFold(self, initial, combine)

    def fold(self, initial: B, combine: t.Callable[[B, T], B]) -> B:
        """Consume the iterator, combining items from left to right."""
        return reduce(combine, self, initial)


def size_hint_of(iterator: t.Iterator) -> t.Tuple[int, t.Optional[int]]:
    if isinstance(iterator, BaseIter):
        return iterator.size_hint()
    return iter_size_hint(iterator)


def count_of(iterator: t.Iterator) -> int:
    if isinstance(iterator, BaseIter):
        return iterator.count()
    return count_items(iterator)


class Iter(BaseIter[T]):
    """Wraps any iterable to expose adaptors of the package on it.

    >>> from operator import mul
    >>> list(Iter([1, 2, 3, 4, 5]).running_fold(1, mul))
    [1, 2, 6, 24, 120]
    """

    __slots__ = ("source",)

    def __init__(self, iterable: t.Iterable[T]):
        self.source = iter(iterable)

    def __next__(self) -> T:
        return next(self.source)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.source!r})"

    def __copy__(self):
        clone = self.__class__.__new__(self.__class__)
        clone.source = copy(self.source)
        return clone

    def size_hint(self):
        return size_hint_of(self.source)

    def count(self):
        return count_of(self.source)
