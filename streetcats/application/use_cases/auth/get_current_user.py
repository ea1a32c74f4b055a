# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UnknownUserError
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a bearer token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token

        Args:
            token: JWT access token (without the "Bearer " prefix)

        Returns:
            UserResponse with user information

        Raises:
            MalformedTokenError: If the token cannot be verified
            ExpiredTokenError: If the token is past its expiry
            UnknownUserError: If the token's user no longer exists
        """
        claims = decode_jwt_token(token)

        # Always re-read the user so deletions take effect immediately
        user = await self.user_repository.find_by_id(claims.user_id)
        if user is None:
            raise UnknownUserError()

        return UserResponse(
            id=user.id or "",
            email=user.email,
            name=user.name,
        )
