from typing import TYPE_CHECKING, Callable, Type
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


AUTH_USE_CASES = (RegisterUserUseCase, LoginUserUseCase, GetCurrentUserUseCase)


def _credential_store_factory(container: "BaseContainer", use_case_type: Type) -> Callable[[], object]:
    return lambda: use_case_type(user_repository=container.get(UserRepository))


class AuthProvider:
    """Registers register/login/current-user use cases; each needs only the credential store"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case_type in AUTH_USE_CASES:
            container.register_factory(
                use_case_type,
                _credential_store_factory(container, use_case_type),
            )
