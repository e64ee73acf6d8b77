import asyncio
import logging
from typing import Callable, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from config import Config
from .errors import StoreUnavailableError

logger = logging.getLogger(__name__)


class MongoStore:
    """Owns the single MongoDB client shared by every request."""

    def __init__(
        self,
        uri: str = None,
        db_name: str = None,
        client_factory: Callable = AsyncIOMotorClient,
        max_attempts: int = None,
        delay: float = None,
    ):
        self.uri = uri or Config.mongo_uri()
        self.db_name = db_name or Config.DB_NAME
        self.client_factory = client_factory
        self.max_attempts = max_attempts or Config.DB_CONNECT_RETRIES
        self.delay = Config.DB_CONNECT_DELAY if delay is None else delay
        self.client = None
        self.db = None

    @property
    def is_connected(self) -> bool:
        return self.db is not None

    async def connect(self, max_attempts: Optional[int] = None, delay: Optional[float] = None):
        """Connect and ping, retrying with a fixed delay.

        Returns:
            The selected database handle.

        Raises:
            StoreUnavailableError: when every attempt failed.
        """
        attempts = max_attempts or self.max_attempts
        delay = self.delay if delay is None else delay

        for attempt in range(1, attempts + 1):
            client = None
            try:
                client = self.client_factory(
                    self.uri,
                    server_api=ServerApi("1", strict=True, deprecation_errors=True),
                    tz_aware=True,
                )
                await client.admin.command("ping")
            except PyMongoError as e:
                logger.error(f"MongoDB connection attempt {attempt} failed: {e}")
                if client is not None:
                    client.close()
                if attempt == attempts:
                    raise StoreUnavailableError(
                        f"Failed to connect to MongoDB after {attempts} attempts"
                    ) from e
                await asyncio.sleep(delay)
                continue

            self.client = client
            self.db = client[self.db_name]
            logger.info("Connected successfully to MongoDB Atlas!")
            return self.db

    def collection(self, name: str):
        if self.db is None:
            raise StoreUnavailableError()
        return self.db[name]

    async def ping(self) -> bool:
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB health check failed: {e}")
            return False

    def close(self) -> None:
        if self.client is None:
            return
        self.client.close()
        self.client = None
        self.db = None
        logger.info("MongoDB connection closed.")
