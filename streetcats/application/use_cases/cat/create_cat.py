# Standard library imports
import logging

# Local application imports
from ....domain.repositories.cat_repository import CatRepository
from ....domain.models.cat import Cat, Location
from ...dto.cat_dto import CatCreateRequest, CatResponse
from ...dto.user_dto import AuthorSummary, UserResponse
from .cat_mapper import cat_to_response

logger = logging.getLogger(__name__)


class CreateCatUseCase:
    """Use case for posting a new cat sighting"""

    def __init__(self, cat_repository: CatRepository) -> None:
        self.cat_repository = cat_repository

    async def execute(
        self,
        request: CatCreateRequest,
        image_filename: str,
        author: UserResponse,
    ) -> CatResponse:
        """
        Create a new cat

        Args:
            request: Validated form fields
            image_filename: Name of the already stored image
            author: Authenticated user posting the sighting

        Returns:
            CatResponse with the saved cat
        """
        new_cat = Cat(
            id=None,  # Will be set by repository
            name=request.name,
            description=request.description,
            location=Location(lat=request.lat, lng=request.lng),
            image=image_filename,
            author=author.id,
        )

        saved_cat = await self.cat_repository.save(new_cat)
        logger.info(f"User {author.id} created cat {saved_cat.id}")

        return cat_to_response(
            saved_cat,
            AuthorSummary(id=author.id, name=author.name, email=author.email),
        )
