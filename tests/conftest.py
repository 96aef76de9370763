import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from temple_booking.core.config import Settings
from temple_booking.main import create_app
from temple_booking.services.booking_store import BookingStore

class InsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id

class InMemoryCollection:
    """Just enough of AsyncCollection for the booking store."""

    def __init__(self):
        self.documents = []

    async def insert_one(self, document):
        # The driver assigns _id on the caller's dict
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return InsertResult(document["_id"])

    async def find_one(self, query):
        for document in self.documents:
            if all(document.get(key) == value for key, value in query.items()):
                return dict(document)
        return None

class UnreachableCollection(InMemoryCollection):
    async def insert_one(self, document):
        raise ServerSelectionTimeoutError("127.0.0.1:27017: [Errno 111] Connection refused")

@pytest.fixture
def test_settings():
    return Settings(ERROR_LOG_FILE="", LOG_LEVEL="WARNING")

@pytest.fixture
def collection():
    return InMemoryCollection()

@pytest.fixture
def client(collection, test_settings):
    app = create_app(settings=test_settings, store=BookingStore(collection))
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def valid_payload():
    return {
        "name": "Asha",
        "email": "a@x.com",
        "date": "2025-06-01",
        "time": "10:00",
        "temple": "Shiva Temple"
    }
