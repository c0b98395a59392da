
from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_connection,
    get_user_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the connection handle and the users collection.
        This is the ONLY place where database connections are registered.
        """
        connection = get_connection()

        container.register_singleton("mongo_connection", connection)
        container.register_singleton("database", connection.database)
        container.register_singleton("user_collection", get_user_collection())
