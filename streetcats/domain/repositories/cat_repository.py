from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.cat import Cat


class CatRepository(ABC):
    """Repository interface - defines contract for cat data access"""

    @abstractmethod
    async def find_by_id(self, cat_id: str) -> Optional[Cat]:
        """Find cat by ID"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Cat]:
        """Find all cats, newest first"""
        pass

    @abstractmethod
    async def save(self, cat: Cat) -> Cat:
        """Save a new cat"""
        pass

    @abstractmethod
    async def delete(self, cat_id: str) -> bool:
        """Delete cat by ID, returning whether a record was removed"""
        pass

    async def ensure_indexes(self) -> None:
        return None
