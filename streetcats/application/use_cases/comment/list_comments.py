# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.comment_repository import CommentRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.comment_dto import CommentResponse
from ...services.authors import load_author_summaries
from .comment_mapper import comment_to_response


class ListCommentsUseCase:
    """Use case for listing the comments of a cat"""

    def __init__(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
    ) -> None:
        self.comment_repository = comment_repository
        self.user_repository = user_repository

    async def execute(self, cat_id: str) -> List[CommentResponse]:
        """
        List comments for a cat, most recent first

        Args:
            cat_id: ID of the cat

        Returns:
            List of CommentResponse objects (empty for unknown cats)
        """
        comments = await self.comment_repository.find_by_cat(cat_id)
        authors = await load_author_summaries(
            self.user_repository, [comment.author for comment in comments]
        )
        return [comment_to_response(comment, authors[comment.author]) for comment in comments]
