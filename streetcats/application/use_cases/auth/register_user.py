# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import DuplicateEmailError
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            DuplicateEmailError: If a user with this email already exists
        """
        # Early rejection; the unique index decides concurrent registrations
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise DuplicateEmailError()

        hashed_password = await asyncio.to_thread(hash_password, request.password)

        saved_user = await self.user_repository.create(
            email=request.email,
            hashed_password=hashed_password,
            name=request.name,
        )
        logger.info(f"Registered user {saved_user.id}")

        return UserResponse(
            id=saved_user.id or "",
            email=saved_user.email,
            name=saved_user.name,
        )
