# Standard library imports
import logging
from typing import Optional, TYPE_CHECKING

# Local application imports
from ....domain.repositories.cat_repository import CatRepository
from ....domain.repositories.comment_repository import CommentRepository
from ....domain.exceptions import NotFoundError
from ....domain.services.ownership import ensure_ownership
from ...dto.user_dto import UserResponse

if TYPE_CHECKING:
    from ....infrastructure.storage.local_image_storage import LocalImageStorage

logger = logging.getLogger(__name__)


class DeleteCatUseCase:
    """Use case for deleting a cat sighting (author only)"""

    def __init__(
        self,
        cat_repository: CatRepository,
        comment_repository: CommentRepository,
        image_storage: Optional["LocalImageStorage"] = None,
    ) -> None:
        self.cat_repository = cat_repository
        self.comment_repository = comment_repository
        self.image_storage = image_storage

    async def execute(self, cat_id: str, current_user: UserResponse) -> None:
        """
        Delete a cat together with its comments and image

        Args:
            cat_id: ID of the cat
            current_user: Authenticated user requesting the deletion

        Raises:
            NotFoundError: If the cat does not exist
            ForbiddenError: If current_user is not the cat's author
        """
        cat = await self.cat_repository.find_by_id(cat_id)
        if cat is None:
            raise NotFoundError("Cat not found")

        ensure_ownership(cat, current_user)

        await self.cat_repository.delete(cat_id)
        removed_comments = await self.comment_repository.delete_by_cat(cat_id)
        if self.image_storage is not None:
            self.image_storage.delete(cat.image)

        logger.info(
            f"User {current_user.id} deleted cat {cat_id} ({removed_comments} comments removed)"
        )
