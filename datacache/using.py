"""Mixins that store an object's fields in a DataCache."""

from .cache import default_data_cache
from .exceptions import AccessingUnRegisteredFieldId


class UsingDataCacheIn:
    """Mixin for classes whose fields live in a DataCache.

    Each class deriving directly from this one is a base type with its own
    cache and its own map from local field ids to registered field ids.
    Fields are declared by also deriving from classes made by data_block().
    """

    _cache = default_data_cache()
    _cache_set = False
    _field_ids = {}
    _latched = set()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if UsingDataCacheIn in cls.__bases__:
            cls._cache = default_data_cache()
            cls._cache_set = False
            cls._field_ids = {}
            cls._latched = set()

    def __init__(self, oid=None):
        """Create a new cache entry, or refer to the existing entry ``oid``."""
        super().__init__()
        self._register_declared_fields()
        self._oid = self._cache.create_object() if oid is None else oid

    @classmethod
    def _register_declared_fields(cls):
        for klass in cls.__mro__:
            declared = klass.__dict__.get("_data_block_field")
            if declared is None or klass in cls._latched:
                continue
            cls._latched.add(klass)
            field_id, factory = declared
            cls.register_field(field_id, factory)

    def oid(self):
        """Return this object's id in the cache."""
        return self._oid

    @classmethod
    def get(cls, oid, field_id):
        """Return local field ``field_id`` of object ``oid``."""
        return cls._cache.get(oid, cls.registered_id(field_id))

    @classmethod
    def set(cls, oid, field_id, value):
        """Store ``value`` as local field ``field_id`` of object ``oid``."""
        cls._cache.set(oid, cls.registered_id(field_id), value)

    @classmethod
    def collection(cls, field_id):
        """Return the whole collection of local field ``field_id``."""
        return cls._cache.get_collection(cls.registered_id(field_id))

    @classmethod
    def set_data_cache(cls, cache):
        """Use ``cache`` for this base type; only the first call takes effect."""
        if not cls._cache_set:
            cls._cache = cache
            cls._cache_set = True

    @classmethod
    def get_data_cache(cls):
        """Return the cache this base type works with."""
        return cls._cache

    @classmethod
    def register_field(cls, field_id, factory):
        """Register a collection for local field ``field_id`` in the cache."""
        registered = cls._cache.register_field(factory)
        cls._field_ids.setdefault(field_id, registered)

    @classmethod
    def registered_id(cls, field_id):
        """Return the cache's field id for local field ``field_id``."""
        try:
            return cls._field_ids[field_id]
        except KeyError:
            raise AccessingUnRegisteredFieldId(field_id) from None


def data_block(field_id, factory):
    """Return a mixin declaring local field ``field_id`` with values made by ``factory``."""
    return type(
        f"DataBlock[{field_id}]",
        (),
        {"_data_block_field": (field_id, factory), "__slots__": ()},
    )