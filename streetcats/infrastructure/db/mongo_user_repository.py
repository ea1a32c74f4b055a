# Standard library imports
import logging
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateEmailError
from ...utils.datetime_utils import now, ensure_utc
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Canonical form used for storing and looking up emails"""
    return email.strip().lower()


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """Create the unique email index that arbitrates concurrent registrations"""
        await self.user_collection.create_index(
            [(UserFields.EMAIL, ASCENDING)],
            unique=True,
            name="email_unique",
        )

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (any case)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one(
                {UserFields.EMAIL: normalize_email(email)}
            )
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_ids(self, user_ids: List[str]) -> List[User]:
        object_ids = []
        for user_id in user_ids:
            try:
                object_ids.append(ObjectId(user_id))
            except (InvalidId, ValueError, TypeError):
                continue

        if not object_ids:
            return []

        try:
            cursor = self.user_collection.find({UserFields.MONGO_ID: {"$in": object_ids}})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise RuntimeError(f"Error finding users by ID: {str(e)}")

    async def create(self, email: str, hashed_password: str, name: str) -> User:
        """
        Persist a new user

        Args:
            email: Email address (normalized before storage)
            hashed_password: Output of hash_password
            name: Display name

        Returns:
            Created User domain model with ID set

        Raises:
            DuplicateEmailError: If another user already has this email
        """
        user = User(
            id=None,
            name=name.strip(),
            email=normalize_email(email),
            hashed_password=hashed_password,
            created_at=now(),
        )
        user_dict = self._user_to_dict(user)

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError:
            logger.info(f"Registration rejected: email {user.email} already exists")
            raise DuplicateEmailError()
        except PyMongoError as e:
            raise RuntimeError(f"Error creating user: {str(e)}")

        user.id = str(result.inserted_id)
        return user

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to a MongoDB document (without _id)"""
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.CREATED_AT: user.created_at,
        }
