from datetime import date, datetime, timezone

import pytest
from bson import ObjectId

from temple_booking.core.errors import StorageError
from temple_booking.models.booking import BookingCreate
from temple_booking.services.booking_store import BookingStore

from conftest import InMemoryCollection, UnreachableCollection

def make_booking(**overrides):
    fields = {
        "name": "Asha",
        "email": "a@x.com",
        "date": date(2025, 6, 1),
        "time": "10:00",
        "temple": "Shiva Temple"
    }
    fields.update(overrides)
    return BookingCreate(**fields)

@pytest.mark.asyncio
async def test_create_assigns_id_and_persists():
    collection = InMemoryCollection()
    store = BookingStore(collection)

    booking = await store.create(make_booking())

    assert ObjectId.is_valid(booking.id)
    assert booking.created_at is not None
    assert booking.date == date(2025, 6, 1)

    stored = await collection.find_one({"_id": ObjectId(booking.id)})
    assert stored["name"] == "Asha"
    assert stored["temple"] == "Shiva Temple"
    assert stored["time"] == "10:00"
    assert stored["date"] == datetime(2025, 6, 1, tzinfo=timezone.utc)

@pytest.mark.asyncio
async def test_duplicates_get_distinct_ids():
    collection = InMemoryCollection()
    store = BookingStore(collection)

    first = await store.create(make_booking())
    second = await store.create(make_booking())

    assert first.id != second.id
    assert len(collection.documents) == 2

@pytest.mark.asyncio
async def test_driver_failure_becomes_storage_error():
    collection = UnreachableCollection()
    store = BookingStore(collection)

    with pytest.raises(StorageError) as excinfo:
        await store.create(make_booking())

    assert excinfo.value.status == 500
    assert "Connection refused" in str(excinfo.value.__cause__)
    assert collection.documents == []
