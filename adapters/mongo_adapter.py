"""MongoDB adapter owning the single client shared by all requests.
"""

from typing import Optional
import logging

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import ConfigurationError, PyMongoError

from app.exceptions import StoreConnectionError

logger = logging.getLogger("foodapi.mongo")


class MongoStore:
    """Handle to one MongoDB deployment.

    Lifecycle: construct, ``await connect()`` once at startup, hand the
    instance to whoever needs collections, ``await close()`` at shutdown.
    ``collection()`` before ``connect()`` raises RuntimeError.
    """

    def __init__(
        self,
        uri: Optional[str],
        db_name: str = "test",
        server_selection_timeout_ms: int = 5000,
    ):
        self.uri = uri
        self.db_name = db_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[AsyncMongoClient] = None
        self._db: Optional[AsyncDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def connect(self) -> None:
        """Create the client and ping the server.

        Raises:
            StoreConnectionError: if no URI is configured or the ping fails
        """
        if not self.uri:
            raise StoreConnectionError("DB_CONNECTION is not set")

        client = None
        try:
            client = AsyncMongoClient(
                self.uri,
                tz_aware=True,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )
            db = client.get_default_database(default=self.db_name)
            await client.admin.command("ping")
        except (ConfigurationError, PyMongoError) as exc:
            if client is not None:
                await client.close()
            raise StoreConnectionError(f"Could not connect to MongoDB: {exc}") from exc

        self._client = client
        self._db = db
        logger.info("Connected to MongoDB (database: %s)", db.name)

    def collection(self, name: str) -> AsyncCollection:
        if self._db is None:
            raise RuntimeError("MongoStore.connect() has not been called")
        return self._db[name]

    async def ping(self) -> bool:
        """Return True if the server answers a ping."""
        if self._client is None:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as exc:
            logger.warning("MongoDB ping failed: %s", exc)
            return False

    async def close(self) -> None:
        """Close MongoDB connection."""
        try:
            if self._client is not None:
                await self._client.close()
                logger.info("MongoDB client closed")
        finally:
            self._client = None
            self._db = None
