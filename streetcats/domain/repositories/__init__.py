from .user_repository import UserRepository
from .cat_repository import CatRepository
from .comment_repository import CommentRepository

__all__ = ["UserRepository", "CatRepository", "CommentRepository"]
