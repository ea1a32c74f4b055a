from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .cat_provider import CatProvider
from .comment_provider import CommentProvider
from .storage_provider import StorageProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "CatProvider",
    "CommentProvider",
    "StorageProvider",
]
