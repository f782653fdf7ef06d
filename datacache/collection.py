"""Contiguous storage of one field's values, one slot per object."""

from .exceptions import OidOutOfRange


def check_non_duplicate_oid(oid, block_size, debug=False):
    """Raise OidOutOfRange if ``oid`` already has a slot (checked in debug only)."""
    if debug and oid < block_size:
        raise OidOutOfRange(oid)


def check_oid_increased_by_one(block_size, oid, debug=False):
    """Raise OidOutOfRange if ``oid`` skipped ahead of the slots (checked in debug only)."""
    if debug and block_size <= oid:
        raise OidOutOfRange(oid)


class DataBlockCollection:
    """The values of one field, indexed by object id.

    ``factory`` makes the default value stored for each new object.
    """

    def __init__(self, factory, debug=False):
        self._factory = factory
        self._debug = debug
        self._blocks = []

    def __iter__(self):
        return iter(self._blocks)

    def __len__(self):
        return len(self._blocks)

    def __getitem__(self, location):
        return self._blocks[location]

    def __setitem__(self, location, value):
        self._blocks[location] = value

    def _check_range(self, location):
        if not 0 <= location < len(self._blocks):
            raise IndexError(
                f"location {location} out of range for collection of size {len(self._blocks)}"
            )

    def at(self, location):
        """Return the value at ``location``, raising IndexError when out of range."""
        self._check_range(location)
        return self._blocks[location]

    def set_at(self, location, value):
        """Store ``value`` at ``location``, raising IndexError when out of range."""
        self._check_range(location)
        self._blocks[location] = value

    def empty(self):
        """Return True if the collection holds no values."""
        return not self._blocks

    def create_object(self, oid):
        """Append a default value for object ``oid``."""
        check_non_duplicate_oid(oid, len(self._blocks), self._debug)
        self._blocks.append(self._factory())
        check_oid_increased_by_one(len(self._blocks), oid, self._debug)