from .list_comments import ListCommentsUseCase
from .create_comment import CreateCommentUseCase
from .delete_comment import DeleteCommentUseCase

__all__ = ["ListCommentsUseCase", "CreateCommentUseCase", "DeleteCommentUseCase"]
