from dataclasses import dataclass
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from temple_booking.core.config import Settings
from temple_booking.core.logger import logger

@dataclass
class DatabaseConnection:
    """Outcome of opening the document store at start-up."""
    client: Optional[AsyncMongoClient] = None
    database: Optional[AsyncDatabase] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.database is not None

async def open_database(settings: Settings) -> DatabaseConnection:
    """
    Connects to MongoDB and checks the server answers a ping.
    Never raises for driver errors; the caller decides what a failure means.
    """
    client = None
    try:
        client = AsyncMongoClient(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
            tz_aware=True,
        )
        database = client.get_default_database(default=settings.MONGODB_DEFAULT_DB)
        await client.admin.command("ping")
    except PyMongoError as e:
        logger.error(f"❌ MongoDB connection error: {e}")
        if client is not None:
            await client.close()
        return DatabaseConnection(error=e)

    logger.info(f"✅ Connected to MongoDB (database '{database.name}')")
    return DatabaseConnection(client=client, database=database)

async def close_database(connection: DatabaseConnection):
    if connection.client is None:
        return
    logger.info("Closing MongoDB connection...")
    await connection.client.close()
