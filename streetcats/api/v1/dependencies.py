# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import APIKeyHeader

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.security import extract_bearer_token
from ...domain.exceptions import AuthenticationError
from ...di.container import get_container
from .errors import internal_error, to_http_exception


# Raw header access so a missing header and a malformed one can be told apart
authorization_header = APIKeyHeader(
    name="Authorization",
    scheme_name="BearerToken",
    description="Bearer <token> obtained from /api/v1/auth/login",
    auto_error=False,
)


async def get_current_user(
    authorization: Optional[str] = Depends(authorization_header),
) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from the bearer token

    Args:
        authorization: Raw Authorization header value, None if absent

    Returns:
        UserResponse with user information

    Raises:
        HTTPException: 401 for any authentication failure, 500 for unexpected errors
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        token = extract_bearer_token(authorization)
        return await get_current_user_use_case.execute(token)
    except AuthenticationError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error authenticating request")
