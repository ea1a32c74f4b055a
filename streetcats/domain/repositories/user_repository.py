from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - the credential store for user records"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address (case-insensitive)"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[str]) -> List[User]:
        """Find all users whose ID is in user_ids"""
        pass

    @abstractmethod
    async def create(self, email: str, hashed_password: str, name: str) -> User:
        """Create a user, raising DuplicateEmailError if the email is taken"""
        pass

    async def ensure_indexes(self) -> None:
        """Create storage indexes backing the repository's constraints"""
        return None
