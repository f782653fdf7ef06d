"""The cache that owns every registered field collection."""

import functools

from .collection import DataBlockCollection
from .exceptions import AccessingUnRegisteredFieldId
from .ids import DataCacheOid, RegisteredFieldId


class DataCache:
    """Holds one DataBlockCollection per registered field, keyed by field id.

    Objects are rows: creating an object appends a default value to every
    collection, and the object's id indexes its value in each of them.
    """

    def __init__(self, debug=False):
        self._debug = debug
        self._blocks = {}

    def register_field(self, factory):
        """Create a collection whose values ``factory`` makes; return its field id."""
        field_id = int(RegisteredFieldId())
        self._blocks[field_id] = DataBlockCollection(factory, self._debug)
        return field_id

    def get_collection(self, field_id):
        """Return the collection registered under ``field_id``."""
        try:
            return self._blocks[field_id]
        except KeyError:
            raise AccessingUnRegisteredFieldId(field_id) from None

    def get(self, oid, field_id):
        """Return the value of field ``field_id`` for object ``oid``."""
        return self.get_collection(field_id)[oid]

    def set(self, oid, field_id, value):
        """Store ``value`` as field ``field_id`` of object ``oid``."""
        self.get_collection(field_id)[oid] = value

    def create_object(self):
        """Add a slot for a new object in every collection; return its oid."""
        oid = int(DataCacheOid())
        for collection in self._blocks.values():
            collection.create_object(oid)
        return oid

    def clear(self):
        """Drop every registered collection."""
        self._blocks.clear()

    def size(self):
        """Return the number of objects held, as seen by the first collection."""
        first = next(iter(self._blocks.values()), None)
        return 0 if first is None else len(first)


@functools.lru_cache(maxsize=None)
def default_data_cache():
    """Return the process-wide cache used when no other has been set."""
    return DataCache()