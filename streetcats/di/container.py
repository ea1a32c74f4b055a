# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    CatProvider,
    CommentProvider,
    DatabaseProvider,
    RepositoryProvider,
    StorageProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database;
       image storage (StorageProvider) - depends on settings only
    3. Use cases (AuthProvider, CatProvider, CommentProvider) - depend on repositories
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories and storage → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        StorageProvider.register(self)
        register_use_cases(self)


def register_use_cases(container: BaseContainer) -> None:
    """Register every use case provider; repositories and image storage must already be registered"""
    AuthProvider.register(container)
    CatProvider.register(container)
    CommentProvider.register(container)


# Global container instance (singleton pattern)
_container: BaseContainer | None = None


def get_container() -> BaseContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        Container with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
