"""Helpers live here: like:
 - options ctx manager
 - counting and size hints of plain iterators
"""
import threading
import typing as t
from collections import deque
from itertools import count
from operator import length_hint


class BaseCtxMeta(type):
    def __init__(cls, name, bases, kwargs):
        super().__init__(name, bases, kwargs)
        cls._ctx = threading.local()


class BaseOptionsMeta(type):
    def __init__(cls, name, bases, kwargs):
        super().__init__(name, bases, kwargs)
        cls._option_attrs = {
            k: v
            for k, v in kwargs.items()
            if not k.startswith("_") and k not in {"clone", "to_defaults"}
        }


class BaseOptions(object, metaclass=BaseOptionsMeta):
    """Container object, which carries current options"""

    def clone(self):
        clone = self.__class__()
        for option_attr in self._option_attrs.keys():
            setattr(clone, option_attr, getattr(self, option_attr))
        return clone

    def to_defaults(self, option_name=None):
        if option_name:
            setattr(self, option_name, self._option_attrs[option_name])
        else:
            for option_attr, value in self._option_attrs.items():
                setattr(self, option_attr, value)


OT = t.TypeVar("OT", bound=BaseOptions)


class BaseCtx(
    t.Generic[OT], metaclass=BaseCtxMeta
):  # pylint:disable=invalid-metaclass
    """Context manager to manage option objects"""

    options_cls: t.Type[OT]
    _ctx: threading.local

    def __enter__(self) -> OT:
        prev_options = getattr(self._ctx, "options", None)
        if not hasattr(self._ctx, "options_stack"):
            self._ctx.options_stack = []
        self._ctx.options_stack.append(prev_options)
        if prev_options:
            self._ctx.options = prev_options.clone()
        else:
            self._ctx.options = self.options_cls()
        return self._ctx.options

    def __exit__(self, exc_type, exc_value, tb):
        self._ctx.options = self._ctx.options_stack.pop()

    @classmethod
    def get_option_value(cls, option_name):
        options = getattr(cls._ctx, "options", None)
        if not options:
            options = cls.options_cls
        return getattr(options, option_name)


class RunningFoldOptions(BaseOptions):
    """Options applied to running folds at the moment they are created.

    Attributes:
      fused: once the source signals exhaustion, keep signaling it without
        polling the source again
      warn_on_resume: emit :py:obj:`ResumedAfterExhaustionWarning` when an
        exhausted running fold is polled again
    """

    fused = False
    warn_on_resume = False


class RunningFoldOptionsCtx(BaseCtx[RunningFoldOptions]):
    """Context manager to tweak running folds created within it.

    >>> import operator
    >>> with RunningFoldOptionsCtx() as options:
    ...     options.fused = True
    ...     sums = running_fold(range(5), 0, operator.add)
    """

    options_cls = RunningFoldOptions


# builtin iterators whose length hint is the exact number of items left
EXACT_HINT_TYPES = frozenset(
    type(iter(obj))
    for obj in (
        [],
        reversed([]),
        (),
        range(0),
        "",
        "ā",
        b"",
        bytearray(),
        {},
        {}.values(),
        {}.items(),
        set(),
    )
)


def count_items(iterator: t.Iterator) -> int:
    """Exhaust the iterator, returning the number of items it produced."""
    counter = count()
    deque(zip(iterator, counter), maxlen=0)
    return next(counter)


def iter_size_hint(iterator: t.Iterator) -> t.Tuple[int, t.Optional[int]]:
    """Estimate the number of items left in a plain iterator.

    Returns a lower bound and an upper bound, the latter is None when unknown.
    """
    hint = length_hint(iterator)
    if type(iterator) in EXACT_HINT_TYPES:
        return hint, hint
    return hint, None
