from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.comment import Comment


class CommentRepository(ABC):
    """Repository interface - defines contract for comment data access"""

    @abstractmethod
    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        """Find comment by ID"""
        pass

    @abstractmethod
    async def find_by_cat(self, cat_id: str) -> List[Comment]:
        """Find all comments for a cat, newest first"""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment"""
        pass

    @abstractmethod
    async def delete(self, comment_id: str) -> bool:
        """Delete comment by ID"""
        pass

    @abstractmethod
    async def delete_by_cat(self, cat_id: str) -> int:
        """Delete every comment of a cat, returning how many were removed"""
        pass

    async def ensure_indexes(self) -> None:
        return None
