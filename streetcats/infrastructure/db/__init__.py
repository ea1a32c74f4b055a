from .mongo_connection import (
    get_database,
    close_database,
    get_user_collection,
    get_cat_collection,
    get_comment_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_cat_repository import MongoCatRepository
from .mongo_comment_repository import MongoCommentRepository

__all__ = [
    "get_database",
    "close_database",
    "get_user_collection",
    "get_cat_collection",
    "get_comment_collection",
    "MongoUserRepository",
    "MongoCatRepository",
    "MongoCommentRepository",
]
