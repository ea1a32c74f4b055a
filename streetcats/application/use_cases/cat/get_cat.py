# Local application imports
from ....domain.repositories.cat_repository import CatRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.cat_dto import CatResponse
from ...services.authors import load_author_summaries
from .cat_mapper import cat_to_response


class GetCatUseCase:
    """Use case for getting a cat by ID"""

    def __init__(self, cat_repository: CatRepository, user_repository: UserRepository) -> None:
        self.cat_repository = cat_repository
        self.user_repository = user_repository

    async def execute(self, cat_id: str) -> CatResponse:
        """
        Get a cat by ID

        Args:
            cat_id: ID of the cat

        Returns:
            CatResponse with cat information

        Raises:
            NotFoundError: If the cat does not exist
        """
        cat = await self.cat_repository.find_by_id(cat_id)
        if cat is None:
            raise NotFoundError("Cat not found")

        authors = await load_author_summaries(self.user_repository, [cat.author])
        return cat_to_response(cat, authors[cat.author])
