from .base_container import BaseContainer
from .container import DIContainer, get_container, register_use_cases

__all__ = [
    "BaseContainer",
    "DIContainer",
    "get_container",
    "register_use_cases",
]
