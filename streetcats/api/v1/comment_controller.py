# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.comment_dto import CommentCreateRequest, CommentResponse
from ...application.dto.common_dto import MessageResponse
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.comment.list_comments import ListCommentsUseCase
from ...application.use_cases.comment.create_comment import CreateCommentUseCase
from ...application.use_cases.comment.delete_comment import DeleteCommentUseCase
from ...domain.exceptions import StreetCatsError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import internal_error, to_http_exception


router = APIRouter(tags=["comments"])


@router.get("/{cat_id}", response_model=List[CommentResponse])
async def list_comments(cat_id: str) -> List[CommentResponse]:
    """
    List the comments of a cat, most recent first

    Args:
        cat_id: ID of the cat

    Returns:
        List of CommentResponse objects
    """
    container = get_container()
    list_comments_use_case = container.get(ListCommentsUseCase)

    try:
        return await list_comments_use_case.execute(cat_id)
    except StreetCatsError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error listing comments")


@router.post("/{cat_id}", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    cat_id: str,
    request: CommentCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> CommentResponse:
    """
    Comment on a cat

    Args:
        cat_id: ID of the cat
        request: Comment body
        current_user: Current authenticated user (from dependency)

    Returns:
        CommentResponse with the created comment
    """
    container = get_container()
    create_comment_use_case = container.get(CreateCommentUseCase)

    try:
        return await create_comment_use_case.execute(
            cat_id=cat_id,
            request=request,
            author=current_user,
        )
    except StreetCatsError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error creating comment")


@router.delete("/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    comment_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> MessageResponse:
    """
    Delete a comment (author only)

    Args:
        comment_id: ID of the comment
        current_user: Current authenticated user (from dependency)

    Returns:
        MessageResponse confirming the deletion
    """
    container = get_container()
    delete_comment_use_case = container.get(DeleteCommentUseCase)

    try:
        await delete_comment_use_case.execute(comment_id=comment_id, current_user=current_user)
    except StreetCatsError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error deleting comment")

    return MessageResponse(message="Comment deleted")
