# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import (
    UserRegistrationRequest,
    UserLoginRequest,
    RegistrationResponse,
    LoginResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...domain.exceptions import StreetCatsError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import internal_error, to_http_exception


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> RegistrationResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        RegistrationResponse with the new user's ID
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        user = await register_use_case.execute(request)
    except StreetCatsError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error registering user")

    return RegistrationResponse(user_id=user.id)


@router.post("/login", response_model=LoginResponse)
async def login_user(request: UserLoginRequest) -> LoginResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        LoginResponse with access token and user information
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        return await login_use_case.execute(request)
    except StreetCatsError as exception:
        raise to_http_exception(exception)
    except Exception as exception:
        raise internal_error(exception, "Error logging in")


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """
    Get current authenticated user information

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with user information
    """
    return current_user
