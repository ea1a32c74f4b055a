from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.cat_repository import CatRepository
from ...domain.repositories.comment_repository import CommentRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_cat_repository import MongoCatRepository
from ...infrastructure.db.mongo_comment_repository import MongoCommentRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )

        container.register_singleton(
            CatRepository,
            MongoCatRepository(cat_collection=container.get("cat_collection"))
        )

        container.register_singleton(
            CommentRepository,
            MongoCommentRepository(comment_collection=container.get("comment_collection"))
        )
