"""Errors raised by the data cache."""


class DataCacheError(Exception):
    """Base class of every error the data cache raises."""


class AccessingUnRegisteredFieldId(DataCacheError, RuntimeError):
    """A field id was used that no collection was registered under."""

    def __init__(self, field_id):
        self.field_id = field_id
        super().__init__(f"Attempted to access an unregistered field id: {field_id}")


class OidOutOfRange(DataCacheError, ValueError):
    """An object id does not follow on from the ids already stored."""

    def __init__(self, oid):
        self.oid = oid
        super().__init__(f"DataBlockCollection size less than OID ({oid})")