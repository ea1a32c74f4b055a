# Local application imports
from ....domain.models.comment import Comment
from ...dto.comment_dto import CommentResponse
from ...dto.user_dto import AuthorSummary


def comment_to_response(comment: Comment, author: AuthorSummary) -> CommentResponse:
    """Convert a Comment domain model into its response DTO"""
    return CommentResponse(
        id=comment.id or "",
        text=comment.text,
        cat_id=comment.cat_id,
        author=author,
        date=comment.date,
    )
