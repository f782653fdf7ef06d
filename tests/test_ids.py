import pytest

from datacache.ids import DataCacheOid, RegisteredFieldId


class MyObject(DataCacheOid):
    pass


class MyObject2(DataCacheOid):
    pass


@pytest.fixture(autouse=True)
def reset_ids():
    DataCacheOid.reset_count(0)
    RegisteredFieldId.reset_count(0)
    yield


def test_object_id_instantiation_starts_at_zero():
    assert int(DataCacheOid()) == 0


def test_object_ids_increment_as_expected():
    first = DataCacheOid()
    assert int(first) == 0

    second = DataCacheOid()
    assert int(second) == 1


def test_objects_inheriting_from_oid_increment_oid():
    obj = MyObject()
    assert int(obj) == 0

    obj2 = MyObject2()
    assert int(obj2) == 1

    assert int(DataCacheOid()) == 2


def test_oid_usable_as_index():
    DataCacheOid()
    oid = DataCacheOid()
    assert ["a", "b", "c"][oid] == "b"


def test_field_ids_increment_independently_of_oids():
    DataCacheOid()
    DataCacheOid()
    assert int(RegisteredFieldId()) == 0
    assert int(RegisteredFieldId()) == 1
    assert int(DataCacheOid()) == 2


def test_oid_keeps_its_value_after_later_creations():
    first = DataCacheOid()
    DataCacheOid()
    DataCacheOid()
    assert int(first) == 0