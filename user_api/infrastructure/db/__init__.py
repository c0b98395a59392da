from .mongo_connection import (
    MongoConnection,
    close_connection,
    get_connection,
    get_database,
    get_user_collection,
)
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "MongoConnection",
    "close_connection",
    "get_connection",
    "get_database",
    "get_user_collection",
    "MongoUserRepository",
]
