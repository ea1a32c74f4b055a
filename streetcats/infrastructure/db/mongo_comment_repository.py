# Standard library imports
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.models.comment import Comment
from ...domain.constants import CommentFields
from ...utils.datetime_utils import now, ensure_utc
from .mongo_connection import get_comment_collection


class MongoCommentRepository(CommentRepository):
    """MongoDB implementation of CommentRepository"""

    def __init__(self, comment_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.comment_collection = (
            comment_collection if comment_collection is not None else get_comment_collection()
        )

    async def ensure_indexes(self) -> None:
        await self.comment_collection.create_index(
            [(CommentFields.CAT_ID, ASCENDING), (CommentFields.DATE, DESCENDING)],
            name="cat_date",
        )

    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        if not comment_id:
            return None

        try:
            object_id = ObjectId(comment_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.comment_collection.find_one({CommentFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error finding comment by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_comment(document)

    async def find_by_cat(self, cat_id: str) -> List[Comment]:
        """
        Find all comments for a cat

        Args:
            cat_id: The cat ID

        Returns:
            List of Comment domain models, most recent first
        """
        if not cat_id:
            return []

        try:
            cursor = self.comment_collection.find(
                {CommentFields.CAT_ID: cat_id}
            ).sort(CommentFields.DATE, DESCENDING)
            comments = []
            async for document in cursor:
                comments.append(self._document_to_comment(document))
            return comments
        except PyMongoError as e:
            raise RuntimeError(f"Error listing comments for cat: {str(e)}")

    async def save(self, comment: Comment) -> Comment:
        if comment.date is None:
            comment.date = now()

        try:
            result = await self.comment_collection.insert_one(self._comment_to_dict(comment))
        except PyMongoError as e:
            raise RuntimeError(f"Error saving comment: {str(e)}")

        comment.id = str(result.inserted_id)
        return comment

    async def delete(self, comment_id: str) -> bool:
        try:
            object_id = ObjectId(comment_id)
        except (InvalidId, ValueError, TypeError):
            return False

        try:
            result = await self.comment_collection.delete_one({CommentFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error deleting comment: {str(e)}")
        return result.deleted_count > 0

    async def delete_by_cat(self, cat_id: str) -> int:
        try:
            result = await self.comment_collection.delete_many({CommentFields.CAT_ID: cat_id})
        except PyMongoError as e:
            raise RuntimeError(f"Error deleting comments for cat: {str(e)}")
        return result.deleted_count

    def _document_to_comment(self, document: dict) -> Comment:
        if not document or CommentFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Comment(
            id=str(document[CommentFields.MONGO_ID]),
            text=document.get(CommentFields.TEXT, ""),
            cat_id=str(document.get(CommentFields.CAT_ID, "")),
            author=str(document.get(CommentFields.AUTHOR, "")),
            date=ensure_utc(document.get(CommentFields.DATE)),
        )

    def _comment_to_dict(self, comment: Comment) -> dict:
        return {
            CommentFields.TEXT: comment.text,
            CommentFields.CAT_ID: comment.cat_id,
            CommentFields.AUTHOR: comment.author,
            CommentFields.DATE: comment.date,
        }
