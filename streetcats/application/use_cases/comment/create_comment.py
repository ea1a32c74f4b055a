# Standard library imports
import logging

# Local application imports
from ....domain.repositories.cat_repository import CatRepository
from ....domain.repositories.comment_repository import CommentRepository
from ....domain.models.comment import Comment
from ....domain.exceptions import NotFoundError
from ...dto.comment_dto import CommentCreateRequest, CommentResponse
from ...dto.user_dto import AuthorSummary, UserResponse
from .comment_mapper import comment_to_response

logger = logging.getLogger(__name__)


class CreateCommentUseCase:
    """Use case for commenting on a cat sighting"""

    def __init__(
        self,
        comment_repository: CommentRepository,
        cat_repository: CatRepository,
    ) -> None:
        self.comment_repository = comment_repository
        self.cat_repository = cat_repository

    async def execute(
        self,
        cat_id: str,
        request: CommentCreateRequest,
        author: UserResponse,
    ) -> CommentResponse:
        """
        Add a comment to a cat

        Args:
            cat_id: ID of the commented cat
            request: Validated comment body
            author: Authenticated user writing the comment

        Returns:
            CommentResponse with the saved comment

        Raises:
            NotFoundError: If the cat does not exist
        """
        cat = await self.cat_repository.find_by_id(cat_id)
        if cat is None:
            raise NotFoundError("Cat not found")

        new_comment = Comment(
            id=None,
            text=request.text,
            cat_id=cat.id or cat_id,
            author=author.id,
        )
        saved_comment = await self.comment_repository.save(new_comment)
        logger.info(f"User {author.id} commented on cat {cat_id}")

        return comment_to_response(
            saved_comment,
            AuthorSummary(id=author.id, name=author.name, email=author.email),
        )
