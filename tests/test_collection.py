from dataclasses import dataclass

import pytest

from datacache.collection import (
    DataBlockCollection,
    check_non_duplicate_oid,
    check_oid_increased_by_one,
)
from datacache.exceptions import OidOutOfRange


@dataclass
class MyTestFieldType:
    part_1: int = 0
    part_2: int = 0


@pytest.fixture
def collection():
    return DataBlockCollection(MyTestFieldType)


@pytest.fixture
def accum_collection():
    return DataBlockCollection(int)


def test_instantiation_is_empty(collection):
    assert collection.empty()
    assert len(collection) == 0


def test_creation_of_data_block(collection):
    collection.create_object(0)
    collection.create_object(1)
    assert not collection.empty()
    assert len(collection) == 2


def test_creation_throws_if_oids_have_gaps_in_debug():
    debug_collection = DataBlockCollection(MyTestFieldType, debug=True)
    debug_collection.create_object(0)
    with pytest.raises(OidOutOfRange):
        debug_collection.create_object(20)


def test_creation_throws_if_oid_is_duplicate_in_debug():
    debug_collection = DataBlockCollection(MyTestFieldType, debug=True)
    debug_collection.create_object(0)
    with pytest.raises(OidOutOfRange):
        debug_collection.create_object(0)


def test_gaps_allowed_without_debug(collection):
    collection.create_object(0)
    collection.create_object(20)
    assert len(collection) == 2


def test_iteration_allows_modification(collection):
    for oid in range(3):
        collection.create_object(oid)
    for field in collection:
        field.part_1 = 0
        field.part_2 = 1
    assert [(f.part_1, f.part_2) for f in collection] == [(0, 1)] * 3


def test_iteration_totals(collection):
    for oid in range(3):
        collection.create_object(oid)
    total = sum(field.part_1 + field.part_2 for field in collection)
    assert total == 0


def test_bracket_operator(accum_collection):
    accum_collection.create_object(0)
    accum_collection.create_object(1)
    accum_collection[0] = 10
    accum_collection[1] = 20
    assert sum(accum_collection) == 30
    assert accum_collection[0] == 10


def test_at_function(accum_collection):
    accum_collection.create_object(0)
    accum_collection.create_object(1)
    accum_collection.set_at(0, 10)
    accum_collection.set_at(1, 20)
    assert sum(accum_collection) == 30
    assert accum_collection.at(0) == 10


def test_at_checks_range(accum_collection):
    accum_collection.create_object(0)
    with pytest.raises(IndexError):
        accum_collection.at(1)
    with pytest.raises(IndexError):
        accum_collection.at(-1)
    with pytest.raises(IndexError):
        accum_collection.set_at(5, 3)


def test_empty_collection_iterates_nothing(collection):
    assert sum(field.part_2 for field in collection) == 0
    assert list(collection) == []


def test_each_object_gets_its_own_default(collection):
    collection.create_object(0)
    collection.create_object(1)
    collection[0].part_1 = 5
    assert collection[1].part_1 == 0


def test_check_helpers_only_raise_in_debug():
    check_non_duplicate_oid(0, 3, debug=False)
    check_oid_increased_by_one(1, 4, debug=False)
    with pytest.raises(OidOutOfRange) as info:
        check_non_duplicate_oid(0, 3, debug=True)
    assert info.value.oid == 0
    with pytest.raises(OidOutOfRange) as info:
        check_oid_increased_by_one(1, 4, debug=True)
    assert info.value.oid == 4