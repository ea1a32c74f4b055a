# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.cat_repository import CatRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.cat_dto import CatResponse
from ...services.authors import load_author_summaries
from .cat_mapper import cat_to_response


class ListCatsUseCase:
    """Use case for listing every cat sighting"""

    def __init__(self, cat_repository: CatRepository, user_repository: UserRepository) -> None:
        self.cat_repository = cat_repository
        self.user_repository = user_repository

    async def execute(self) -> List[CatResponse]:
        """
        List all cats, newest first

        Returns:
            List of CatResponse objects with author summaries
        """
        cats = await self.cat_repository.find_all()
        authors = await load_author_summaries(self.user_repository, [cat.author for cat in cats])
        return [cat_to_response(cat, authors[cat.author]) for cat in cats]
