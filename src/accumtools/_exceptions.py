"""Warnings emitted by iterator adaptors."""


class ResumedAfterExhaustionWarning(RuntimeWarning):
    """An adaptor was polled again after its source signaled exhaustion.

    What happens next is up to the source: most builtin iterators stay
    exhausted, but custom ones may produce more items.
    """
