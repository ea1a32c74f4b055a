# Standard library imports
import time
from dataclasses import dataclass
from typing import Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError
from jwt.utils import base64url_decode, base64url_encode

# Local application imports
from .config import get_settings
from ..domain.exceptions import (
    ExpiredTokenError,
    MalformedTokenError,
    MissingTokenError,
)


BEARER_PREFIX = "Bearer "

USER_ID_CLAIM = "userId"
EMAIL_CLAIM = "email"


@dataclass(frozen=True)
class TokenClaims:
    """Claims carried by an access token"""
    user_id: str
    email: str
    issued_at: int
    expires_at: int


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string (salt embedded)
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError, AttributeError):
        return False


def create_jwt_token(user_id: str, email: str, issued_at: Optional[int] = None) -> str:
    """
    Create a signed access token with a fixed lifetime

    Args:
        user_id: ID of the authenticated user
        email: Email of the user at issuance time
        issued_at: Issuance time as a UNIX timestamp (defaults to now)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    if issued_at is None:
        issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    token_payload = {
        USER_ID_CLAIM: user_id,
        EMAIL_CLAIM: email,
        "iat": issued_at,
        "exp": expires_at,
    }

    return jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def decode_jwt_token(token: str, now: Optional[float] = None) -> TokenClaims:
    """
    Verify a token's signature and expiry and return its claims

    Args:
        token: The JWT token string to verify
        now: Verification time as a UNIX timestamp (defaults to wall clock)

    Returns:
        TokenClaims embedded in the token

    Raises:
        MalformedTokenError: If the token cannot be parsed or its signature does not match
        ExpiredTokenError: If now is past the token's expiry
    """
    settings = get_settings()
    try:
        decoded = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={
                "require": ["exp", "iat", USER_ID_CLAIM],
                "verify_exp": False,
            },
        )
    except InvalidTokenError as e:
        raise MalformedTokenError(f"Invalid token: {str(e)}")

    # Lenient base64 decoding ignores the low bits of the last character
    signature_segment = token.rsplit(".", 1)[-1]
    if base64url_encode(base64url_decode(signature_segment)).decode("ascii") != signature_segment:
        raise MalformedTokenError("Invalid token: non-canonical signature encoding")

    user_id = decoded.get(USER_ID_CLAIM)
    if not isinstance(user_id, str) or not user_id:
        raise MalformedTokenError("Invalid token: missing user ID")

    claims = TokenClaims(
        user_id=user_id,
        email=str(decoded.get(EMAIL_CLAIM, "")),
        issued_at=int(decoded["iat"]),
        expires_at=int(decoded["exp"]),
    )

    current_time = time.time() if now is None else now
    if current_time > claims.expires_at:
        raise ExpiredTokenError()

    return claims


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Extract the raw token from an Authorization header value

    Args:
        authorization: Header value, None when the header is absent

    Returns:
        Token string without the "Bearer " prefix

    Raises:
        MissingTokenError: If no header was sent
        MalformedTokenError: If the header is not "Bearer <token>"
    """
    if not authorization:
        raise MissingTokenError()

    if not authorization.startswith(BEARER_PREFIX):
        raise MalformedTokenError()

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise MalformedTokenError()
    return token
