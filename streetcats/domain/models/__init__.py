from .user import User
from .cat import Cat, Location
from .comment import Comment

__all__ = ["User", "Cat", "Location", "Comment"]
