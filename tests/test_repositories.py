"""
Tests for the food repository and driver error translation.

FoodRepository runs against the in-memory collection; failures come from a
collection that raises real pymongo/bson exceptions.
"""

import pytest
from bson import ObjectId
from bson.errors import InvalidDocument, InvalidId
from pymongo.errors import (
    AutoReconnect,
    DuplicateKeyError,
    NetworkTimeout,
    OperationFailure,
    ServerSelectionTimeoutError,
    WriteError,
)

from app.exceptions import ErrorKind, StoreError
from repositories import FoodRepository
from repositories.base import classify_store_error
from test_fixtures import FakeCollection, FailingCollection, MALFORMED_ID

pytestmark = pytest.mark.anyio


@pytest.fixture
def repo():
    return FoodRepository(FakeCollection())


async def test_create_assigns_object_id_and_keeps_fields(repo):
    created = await repo.create({"name": "Apple", "__v": 0})

    assert isinstance(created["_id"], ObjectId)
    assert created["name"] == "Apple"
    assert await repo.get_by_id(str(created["_id"])) == created


async def test_create_does_not_mutate_input(repo):
    document = {"name": "Apple"}
    await repo.create(document)
    assert document == {"name": "Apple"}


async def test_create_assigns_unique_ids(repo):
    ids = {(await repo.create({"name": f"item {i}"}))["_id"] for i in range(20)}
    assert len(ids) == 20


async def test_get_all_preserves_insertion_order(repo):
    for name in ("Apple", "Milk", "Rice"):
        await repo.create({"name": name})

    assert [d["name"] for d in await repo.get_all()] == ["Apple", "Milk", "Rice"]


async def test_get_by_id_missing_returns_none(repo):
    assert await repo.get_by_id(str(ObjectId())) is None


async def test_update_returns_document_after_update(repo):
    created = await repo.create({"name": "Apple", "quantity": 10})

    updated = await repo.update(str(created["_id"]), {"quantity": 15})

    assert updated["quantity"] == 15
    assert updated["name"] == "Apple"


async def test_update_missing_returns_none(repo):
    assert await repo.update(str(ObjectId()), {"name": "x"}) is None


async def test_delete_returns_removed_document(repo):
    created = await repo.create({"name": "Apple"})

    deleted = await repo.delete(str(created["_id"]))

    assert deleted["_id"] == created["_id"]
    assert await repo.get_all() == []
    assert await repo.delete(str(created["_id"])) is None


@pytest.mark.parametrize("call", ["get_by_id", "delete"])
async def test_malformed_id_raises_validation_store_error(repo, call):
    with pytest.raises(StoreError) as excinfo:
        await getattr(repo, call)(MALFORMED_ID)

    assert excinfo.value.kind == ErrorKind.VALIDATION
    assert isinstance(excinfo.value.__cause__, InvalidId)


async def test_update_malformed_id_raises_validation_store_error(repo):
    with pytest.raises(StoreError) as excinfo:
        await repo.update(MALFORMED_ID, {"name": "x"})
    assert excinfo.value.kind == ErrorKind.VALIDATION


async def test_connectivity_failure_on_every_operation():
    repo = FoodRepository(FailingCollection(ServerSelectionTimeoutError("timed out")))
    food_id = str(ObjectId())

    for call in (
        repo.get_all(),
        repo.get_by_id(food_id),
        repo.create({"name": "x"}),
        repo.update(food_id, {"name": "x"}),
        repo.delete(food_id),
    ):
        with pytest.raises(StoreError) as excinfo:
            await call
        assert excinfo.value.kind == ErrorKind.CONNECTIVITY
        assert excinfo.value.message == "timed out"


async def test_non_driver_errors_are_not_translated():
    repo = FoodRepository(FailingCollection(KeyError("bug")))
    with pytest.raises(KeyError):
        await repo.get_all()


@pytest.mark.parametrize(
    "exc, kind",
    [
        (InvalidId("bad id"), ErrorKind.VALIDATION),
        (InvalidDocument("cannot encode object"), ErrorKind.VALIDATION),
        (WriteError("write failed"), ErrorKind.VALIDATION),
        (DuplicateKeyError("E11000"), ErrorKind.VALIDATION),
        (WriteError("Document failed validation", code=121), ErrorKind.VALIDATION),
        (OperationFailure("Document failed validation", code=121), ErrorKind.VALIDATION),
        (ServerSelectionTimeoutError("no servers"), ErrorKind.CONNECTIVITY),
        (AutoReconnect("connection reset"), ErrorKind.CONNECTIVITY),
        (NetworkTimeout("timed out"), ErrorKind.CONNECTIVITY),
        (OperationFailure("Authentication failed", code=18), ErrorKind.CONNECTIVITY),
    ],
)
def test_classify_store_error(exc, kind):
    assert classify_store_error(exc) == kind
