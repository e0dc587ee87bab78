"""Lazy iterator adaptors. The main one is :py:obj:`RunningFold`, a running
fold (prefix-scan) over an iterable."""
from ._base import BaseIter, Iter  # noqa: F401
from ._exceptions import ResumedAfterExhaustionWarning  # noqa: F401
from ._running_fold import RunningFold, fold, running_fold  # noqa: F401
from ._utils import RunningFoldOptions, RunningFoldOptionsCtx  # noqa: F401


__version__ = "1.0.0"
