# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


class MongoConnection:
    """
    Explicit handle around one motor client.

    The process-wide instance is owned by the application lifespan (see
    get_connection / close_connection). Tests can open a scoped one with
    ``with MongoConnection(uri, name) as connection:``.
    """

    def __init__(self, uri: str, database_name: str) -> None:
        self.uri = uri
        self.database_name = database_name
        self._client: Optional[AsyncIOMotorClient] = None

    def connect(self) -> AsyncIOMotorDatabase:
        """Create the client if needed; motor connects lazily on first I/O"""
        if self._client is None:
            self._client = AsyncIOMotorClient(self.uri)
            logger.info("MongoDB client created for database %s", self.database_name)
        return self._client[self.database_name]

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self.connect()

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB client closed")

    def __enter__(self) -> "MongoConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# Global MongoDB connection instance (singleton pattern)
_connection: Optional[MongoConnection] = None


def get_connection() -> MongoConnection:
    """
    Get the process-wide MongoDB connection handle (singleton pattern)

    Returns:
        MongoConnection configured from settings
    """
    global _connection
    if _connection is None:
        settings = get_settings()
        _connection = MongoConnection(settings.mongo_uri, settings.mongo_database_name)
    return _connection


def close_connection() -> None:
    """Close and forget the process-wide connection, if one was opened"""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance

    Returns:
        MongoDB database instance
    """
    return get_connection().database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]
