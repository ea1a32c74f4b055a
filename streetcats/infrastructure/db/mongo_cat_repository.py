# Standard library imports
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.cat_repository import CatRepository
from ...domain.models.cat import Cat, Location
from ...domain.constants import CatFields
from ...utils.datetime_utils import now, ensure_utc
from .mongo_connection import get_cat_collection


class MongoCatRepository(CatRepository):
    """MongoDB implementation of CatRepository"""

    def __init__(self, cat_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.cat_collection = cat_collection if cat_collection is not None else get_cat_collection()

    async def ensure_indexes(self) -> None:
        await self.cat_collection.create_index([(CatFields.DATE, DESCENDING)], name="date_desc")

    async def find_by_id(self, cat_id: str) -> Optional[Cat]:
        """
        Find cat by ID

        Args:
            cat_id: The cat ID to find

        Returns:
            Cat domain model if found, None otherwise (also for malformed IDs)
        """
        if not cat_id:
            return None

        try:
            object_id = ObjectId(cat_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.cat_collection.find_one({CatFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding cat by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_cat(document)

    async def find_all(self) -> List[Cat]:
        try:
            cursor = self.cat_collection.find().sort(CatFields.DATE, DESCENDING)
            cats = []
            async for document in cursor:
                cats.append(self._document_to_cat(document))
            return cats
        except PyMongoError as e:
            raise RuntimeError(f"Error listing cats: {str(e)}")

    async def save(self, cat: Cat) -> Cat:
        """
        Insert a new cat

        Args:
            cat: Cat domain model without ID

        Returns:
            Saved Cat domain model with ID and date set
        """
        if cat.date is None:
            cat.date = now()

        try:
            result = await self.cat_collection.insert_one(self._cat_to_dict(cat))
        except PyMongoError as e:
            raise RuntimeError(f"Error saving cat: {str(e)}")

        cat.id = str(result.inserted_id)
        return cat

    async def delete(self, cat_id: str) -> bool:
        try:
            object_id = ObjectId(cat_id)
        except (InvalidId, ValueError, TypeError):
            return False

        try:
            result = await self.cat_collection.delete_one({CatFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error deleting cat: {str(e)}")
        return result.deleted_count > 0

    def _document_to_cat(self, document: dict) -> Cat:
        if not document or CatFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        location = document.get(CatFields.LOCATION) or {}
        return Cat(
            id=str(document[CatFields.MONGO_ID]),
            name=document.get(CatFields.NAME, ""),
            description=document.get(CatFields.DESCRIPTION, ""),
            location=Location(
                lat=float(location.get(CatFields.LAT, 0.0)),
                lng=float(location.get(CatFields.LNG, 0.0)),
            ),
            image=document.get(CatFields.IMAGE, ""),
            author=str(document.get(CatFields.AUTHOR, "")),
            date=ensure_utc(document.get(CatFields.DATE)),
        )

    def _cat_to_dict(self, cat: Cat) -> dict:
        return {
            CatFields.NAME: cat.name,
            CatFields.DESCRIPTION: cat.description,
            CatFields.LOCATION: {
                CatFields.LAT: cat.location.lat,
                CatFields.LNG: cat.location.lng,
            },
            CatFields.IMAGE: cat.image,
            CatFields.AUTHOR: cat.author,
            CatFields.DATE: cat.date,
        }
