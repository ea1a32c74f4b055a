# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InvalidCredentialsError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, LoginResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> LoginResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            LoginResponse with the token and the public user record

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            raise InvalidCredentialsError()

        password_ok = await asyncio.to_thread(
            verify_password, request.password, user.hashed_password
        )
        if not password_ok:
            logger.info(f"Failed login for user {user.id}")
            raise InvalidCredentialsError()

        token = create_jwt_token(user_id=user.id or "", email=user.email)
        logger.info(f"User {user.id} logged in")

        return LoginResponse(
            token=token,
            user=UserResponse(id=user.id or "", email=user.email, name=user.name),
        )
