from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError
from .settings import Settings
from ..helper.utils import setup_logging

logger = setup_logging() # initialize logger


class MongoDatabase:
    """
    Owns the Motor client for the lifetime of the application.

    One instance is created by the application factory and handed to the
    request layer through ``app.state``; nothing else opens a client.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: Optional[AsyncIOMotorClient] = None

    async def connect(self):
        if self.client is not None:
            return
        self.client = AsyncIOMotorClient(
            self.settings.MONGO_URI,
            serverSelectionTimeoutMS=self.settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
            connectTimeoutMS=self.settings.MONGO_CONNECT_TIMEOUT_MS,
            socketTimeoutMS=self.settings.MONGO_SOCKET_TIMEOUT_MS,
            maxPoolSize=self.settings.MONGO_MAX_POOL_SIZE,
            tz_aware=True,
        )
        # connect to MongoDB with error handling
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            self.client.close()
            self.client = None
            logger.error(f"Failed to connect to MongoDB: {e.__class__.__name__}")
            raise ConnectionError("Failed to connect to MongoDB") from e
        logger.info(f"Connected to MongoDB database '{self.settings.MONGO_DB}'")

    @property
    def users(self) -> AsyncIOMotorCollection:
        if self.client is None:
            raise RuntimeError("MongoDB client is not connected")
        return self.client[self.settings.MONGO_DB][self.settings.MONGO_USER_COLLECTION]

    def close(self):
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")
