from typing import TYPE_CHECKING
from ...domain.repositories.cat_repository import CatRepository
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.comment.list_comments import ListCommentsUseCase
from ...application.use_cases.comment.create_comment import CreateCommentUseCase
from ...application.use_cases.comment.delete_comment import DeleteCommentUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CommentProvider:
    """Comment use case provider - registers all comment-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListCommentsUseCase,
            lambda: ListCommentsUseCase(
                comment_repository=container.get(CommentRepository),
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            CreateCommentUseCase,
            lambda: CreateCommentUseCase(
                comment_repository=container.get(CommentRepository),
                cat_repository=container.get(CatRepository)
            )
        )

        container.register_factory(
            DeleteCommentUseCase,
            lambda: DeleteCommentUseCase(
                comment_repository=container.get(CommentRepository)
            )
        )
