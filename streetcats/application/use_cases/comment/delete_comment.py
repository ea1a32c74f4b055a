# Standard library imports
import logging

# Local application imports
from ....domain.repositories.comment_repository import CommentRepository
from ....domain.exceptions import NotFoundError
from ....domain.services.ownership import ensure_ownership
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class DeleteCommentUseCase:
    """Use case for deleting a comment (author only)"""

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def execute(self, comment_id: str, current_user: UserResponse) -> None:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")

        ensure_ownership(comment, current_user)

        await self.comment_repository.delete(comment_id)
        logger.info(f"User {current_user.id} deleted comment {comment_id}")
