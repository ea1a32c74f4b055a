"""Constants for domain model field names"""

from .user_fields import UserFields
from .cat_fields import CatFields
from .comment_fields import CommentFields

__all__ = [
    "UserFields",
    "CatFields",
    "CommentFields",
]
