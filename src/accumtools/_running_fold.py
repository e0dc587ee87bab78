"""Running fold: lazy prefix-scan over an iterable."""
import typing as t
import warnings
from copy import copy
from functools import reduce

from ._base import BaseIter, count_of, size_hint_of
from ._exceptions import ResumedAfterExhaustionWarning
from ._utils import RunningFoldOptionsCtx


T = t.TypeVar("T")
B = t.TypeVar("B")


class RunningFold(BaseIter[B], t.Generic[T, B]):
    """Iterator adaptor which yields the accumulated value after each item of
    the source.

    It is similar to :py:obj:`functools.reduce`, but instead of returning the
    final result it lazily yields the current accumulated value on every
    step, so the last yielded value is what ``reduce`` would have returned.

    >>> fold_ = RunningFold([1, 2, 3, 4, 5], 1, lambda acc, i: acc * i)
    >>> next(fold_), next(fold_), next(fold_), next(fold_), next(fold_)
    (1, 2, 6, 24, 120)
    >>> next(fold_)
    Traceback (most recent call last):
    StopIteration

    Accumulated values are passed around as is, so ``combine`` must return a
    new value rather than mutate the previous one. ``StopIteration`` raised
    by ``combine`` is turned into ``RuntimeError``, as generators do, so it
    is never mistaken for exhaustion of the source.

    The iterator is **not** fused: once the source signals exhaustion, it is
    up to the source what happens on further polling, unless
    ``RunningFoldOptions.fused`` is enabled.
    """

    __slots__ = (
        "source",
        "combine",
        "_acc",
        "_exhausted",
        "_fused",
        "_warn_on_resume",
    )

    def __init__(
        self,
        source: t.Iterable[T],
        initial: B,
        combine: t.Callable[[B, T], B],
    ):
        """
        Args:
          source: iterable to consume, the adaptor takes ownership of its
            iterator
          initial: initial accumulated value, never yielded itself
          combine: callable of accumulated value and the next item, which
            returns the new accumulated value
        """
        self.source = iter(source)
        self.combine = combine
        self._acc = initial
        self._exhausted = False
        self._fused = RunningFoldOptionsCtx.get_option_value("fused")
        self._warn_on_resume = RunningFoldOptionsCtx.get_option_value(
            "warn_on_resume"
        )

    @property
    def acc(self) -> B:
        """Value accumulated so far."""
        return self._acc

    @property
    def exhausted(self) -> bool:
        """Whether the source has signaled exhaustion at least once."""
        return self._exhausted

    def __next__(self) -> B:
        if self._exhausted:
            if self._fused:
                raise StopIteration
            if self._warn_on_resume:
                warnings.warn(
                    f"{self.__class__.__name__} is polled after its source "
                    "got exhausted",
                    ResumedAfterExhaustionWarning,
                    stacklevel=2,
                )

        try:
            item = next(self.source)
        except StopIteration:
            self._exhausted = True
            raise

        try:
            acc = self.combine(self._acc, item)
        except StopIteration as e:
            raise RuntimeError("combine raised StopIteration") from e

        self._acc = acc
        return acc

    def size_hint(self):
        if self._exhausted and self._fused:
            return 0, 0
        return size_hint_of(self.source)

    def count(self):
        if self._exhausted and self._fused:
            return 0
        return count_of(self.source)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}"
            f"(source={self.source!r}, acc={self._acc!r}, ...)"
        )

    def __copy__(self):
        clone = self.__class__.__new__(self.__class__)
        clone.source = copy(self.source)
        clone.combine = self.combine
        clone._acc = self._acc
        clone._exhausted = self._exhausted
        clone._fused = self._fused
        clone._warn_on_resume = self._warn_on_resume
        return clone


def running_fold(
    iterable: t.Iterable[T], initial: B, combine: t.Callable[[B, T], B]
) -> RunningFold[T, B]:
    """Lazily yield running combinations of items of the iterable.

    >>> import operator
    >>> list(running_fold("abc", "", operator.add))
    ['a', 'ab', 'abc']

    Args:
      iterable: source of items
      initial: initial accumulated value
      combine: callable of accumulated value and the next item
    """
    return RunningFold(iterable, initial, combine)


def fold(
    iterable: t.Iterable[T], initial: B, combine: t.Callable[[B, T], B]
) -> B:
    """Combine all items of the iterable from left to right, starting with
    initial."""
    return reduce(combine, iterable, initial)
