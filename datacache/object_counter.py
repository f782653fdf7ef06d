"""Per-type, thread-safe counting of created objects."""

import threading


class _AtomicCount:
    """An integer counter guarded by a lock."""

    def __init__(self, value=0):
        self._value = value
        self._lock = threading.Lock()

    def increment(self):
        with self._lock:
            self._value += 1
            return self._value

    def reset(self, value):
        with self._lock:
            self._value = value

    @property
    def value(self):
        with self._lock:
            return self._value


class ObjectCounter:
    """Counts the objects created of each counted type.

    Every class that derives directly from ``ObjectCounter`` is a counted
    type with its own counter; classes further down share the counter of
    the counted type they derive from.
    """

    _counter = _AtomicCount()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if ObjectCounter in cls.__bases__:
            cls._counter = _AtomicCount()

    def __init__(self, increment=True):
        self._counted_ordinal = self._counter.increment() if increment else None

    def count(self):
        """Return how many objects of this counted type have been created."""
        return self._counter.value

    @classmethod
    def reset_count(cls, value=0):
        """Set the counter of this counted type to ``value``."""
        cls._counter.reset(value)