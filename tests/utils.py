class CountingIterator:
    """Iterator over a list, which records how many times it was polled.

    Items equal to ``STOP`` signal exhaustion without ending the iterator, so
    it can produce more items afterwards.
    """

    STOP = object()

    def __init__(self, items):
        self.items = list(items)
        self.index = 0
        self.polls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.polls += 1
        if self.index >= len(self.items):
            raise StopIteration
        item = self.items[self.index]
        self.index += 1
        if item is self.STOP:
            raise StopIteration
        return item


class RecordingCombine:
    """Stateful combining function which records its calls."""

    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, acc, item):
        self.calls.append((acc, item))
        return self.func(acc, item)
