# datacache

`datacache` keeps the fields of many objects in one place, grouped by field
rather than by object. Each registered field has its own collection that holds
one value per object. Code can then work through every value of a single field
in one pass, which is the core idea of data-oriented design.

## Installation

```
pip install datacache
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "datacache[test]"
pytest
```

## Modules

- `datacache.cache`: `DataCache` and `default_data_cache()`
- `datacache.collection`: `DataBlockCollection`, `check_non_duplicate_oid`,
  `check_oid_increased_by_one`
- `datacache.using`: `UsingDataCacheIn` and `data_block()`
- `datacache.ids`: `DataCacheOid` and `RegisteredFieldId`
- `datacache.object_counter`: `ObjectCounter`
- `datacache.string_streamer`: `StringStreamer`
- `datacache.exceptions`: `DataCacheError`, `AccessingUnRegisteredFieldId`,
  `OidOutOfRange`

## The cache

`DataCache(debug=False)` holds one `DataBlockCollection` for each registered
field.

- `register_field(factory)` adds a field and returns its field id. The factory
  is called with no arguments to make each object's starting value, so `int`,
  `list` or a dataclass will all work.
- `create_object()` appends a value made by the factory to every collection and
  returns the new object's id (its *oid*).
- `get(oid, field_id)` and `set(oid, field_id, value)` read and write one
  object's value for a field. `get_collection(field_id)` returns the whole
  collection.
- `clear()` removes every field, and `size()` returns the length of the first
  collection, or 0 when there are none.

`default_data_cache()` always returns the same shared `DataCache`.

Field ids and oids are issued by `RegisteredFieldId` and `DataCacheOid`. These
count upward from 0 across the whole process and are shared by every cache. A
collection stores its values by position. An oid therefore matches its slot only
when a single cache creates all objects. In the same way, a fresh cache does not
restart its field ids at 0.

## Collections

A `DataBlockCollection` is the sequence of values for one field. It supports
`len()`, iteration, and `[]` reads and writes, with the usual list indexing.
`at(location)` and `set_at(location, value)` accept only locations from 0 to
`len() - 1` and raise `IndexError` for anything else. `empty()` returns whether
the collection holds no values.

When a cache or collection is built with `debug=True`, `create_object(oid)`
checks that the oid is neither a duplicate nor a jump ahead of the slots already
held. If it is, it raises `OidOutOfRange`. The two checks are also available on
their own as `check_non_duplicate_oid(oid, block_size, debug)` and
`check_oid_increased_by_one(block_size, oid, debug)`.

## Example

```python
from datacache.cache import DataCache

cache = DataCache()

position = cache.register_field(int)
velocity = cache.register_field(int)

cache.create_object()
cache.create_object()

velocities = cache.get_collection(velocity)
velocities[0] = 3
velocities[1] = 5

positions = cache.get_collection(position)
for slot, step in enumerate(velocities):
    positions[slot] += step

assert list(positions) == [3, 5]
```

## Using a cache from your own classes

Derive from `UsingDataCacheIn` and declare fields by also deriving from mixins
made by `data_block(field_id, factory)`. The field ids are local to your class.

```python
from datacache.using import UsingDataCacheIn, data_block

HEALTH, SCORE = 0, 1


class Player(UsingDataCacheIn, data_block(HEALTH, lambda: 100), data_block(SCORE, int)):
    def hit(self, damage):
        Player.set(self.oid(), HEALTH, Player.get(self.oid(), HEALTH) - damage)


player = Player()
player.hit(30)
print(Player.get(player.oid(), HEALTH))
```

- Every class that derives directly from `UsingDataCacheIn` has its own cache
  setting and its own map from local to registered field ids. Its subclasses
  share both.
- Declared fields are registered when the first instance is created. A field can
  also be registered directly with `register_field(field_id, factory)`.
  `registered_id(field_id)` returns the id the cache assigned.
- `Player()` creates a new entry in the cache. `Player(oid)` refers to an entry
  that already exists and creates nothing.
- `get`, `set` and `collection` are class methods that take local field ids.
- `set_data_cache(cache)` chooses the cache for the class. Only the first call
  has any effect, and it should come before any instance is created.
  `get_data_cache()` returns the cache in use, which is `default_data_cache()`
  unless another cache has been set.

## Counters and helpers

`ObjectCounter` counts instances for each class that derives directly from it.
`count()` returns the current total, `reset_count(value=0)` sets it, and
`ObjectCounter(increment=False)` creates an instance without counting it.
`DataCacheOid()` and `RegisteredFieldId()` each produce the next number in their
own sequence. Use `int()` to read the number.

`StringStreamer` builds a string with `<<`. For example,
`str(StringStreamer() << 10 << " " << 20)` gives `"10 20"`.

## Errors

Using a field id that was never registered raises `AccessingUnRegisteredFieldId`,
which is also a `RuntimeError`. The debug checks raise `OidOutOfRange`, which is
also a `ValueError`. Both derive from `DataCacheError`.

## What it does not do

Everything is kept in memory for the life of the process. Nothing is saved to
disk, objects cannot be removed from a cache, and the package provides no
command-line tool.