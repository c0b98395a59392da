# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    StorageProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connection (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Image storage (StorageProvider)
    4. Use cases (UserProvider) - depend on repositories and storage
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → storage → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        StorageProvider.register(self)
        UserProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next get_container() rebuilds it"""
    global _container
    _container = None
