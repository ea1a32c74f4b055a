from typing import TYPE_CHECKING
from ...domain.repositories.cat_repository import CatRepository
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.cat.create_cat import CreateCatUseCase
from ...application.use_cases.cat.list_cats import ListCatsUseCase
from ...application.use_cases.cat.get_cat import GetCatUseCase
from ...application.use_cases.cat.delete_cat import DeleteCatUseCase
from ...infrastructure.storage.local_image_storage import LocalImageStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CatProvider:
    """Cat use case provider - registers all cat-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateCatUseCase,
            lambda: CreateCatUseCase(
                cat_repository=container.get(CatRepository)
            )
        )

        container.register_factory(
            ListCatsUseCase,
            lambda: ListCatsUseCase(
                cat_repository=container.get(CatRepository),
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            GetCatUseCase,
            lambda: GetCatUseCase(
                cat_repository=container.get(CatRepository),
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            DeleteCatUseCase,
            lambda: DeleteCatUseCase(
                cat_repository=container.get(CatRepository),
                comment_repository=container.get(CommentRepository),
                image_storage=container.get(LocalImageStorage)
            )
        )
