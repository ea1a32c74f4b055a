from .config import Settings, get_settings
from .security import (
    TokenClaims,
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
    extract_bearer_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "TokenClaims",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "decode_jwt_token",
    "extract_bearer_token",
]
