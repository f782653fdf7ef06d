"""Sequential identifiers for cached objects and registered fields."""

from .object_counter import ObjectCounter


class _SequentialId(ObjectCounter):
    """An identifier taken from the creation order of its type."""

    def __init__(self):
        super().__init__()
        self._id = self._counted_ordinal - 1

    def __int__(self):
        return self._id

    def __index__(self):
        return self._id

    def __repr__(self):
        return f"{type(self).__name__}({self._id})"


class DataCacheOid(_SequentialId, ObjectCounter):
    """The next free object id: 0, 1, 2, ... in order of creation."""

    def __init__(self):
        super().__init__()

    def __int__(self):
        return self._id

    def __index__(self):
        return self._id


class RegisteredFieldId(_SequentialId, ObjectCounter):
    """The next free field id: 0, 1, 2, ... in order of creation."""

    def __init__(self):
        super().__init__()

    def __int__(self):
        return self._id

    def __index__(self):
        return self._id