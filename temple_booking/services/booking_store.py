from datetime import datetime, timezone

from pymongo.errors import PyMongoError

from temple_booking.core.errors import StorageError
from temple_booking.core.logger import logger
from temple_booking.models.booking import Booking, BookingCreate

class BookingStore:
    """
    Write-only persistence for bookings.

    ``collection`` is anything with an awaitable ``insert_one`` in the
    shape of pymongo's ``AsyncCollection``.
    """

    def __init__(self, collection):
        self._collection = collection

    async def create(self, payload: BookingCreate) -> Booking:
        document = payload.to_document()
        document["created_at"] = datetime.now(timezone.utc)

        try:
            result = await self._collection.insert_one(document)
        except PyMongoError as e:
            logger.error(f"❌ DB Error (create booking): {e}")
            raise StorageError("Failed to store booking") from e

        document["_id"] = result.inserted_id
        booking = Booking.from_document(document)
        logger.info(f"✅ Booking {booking.id} stored for {booking.temple} on {booking.date} {booking.time}")
        return booking
