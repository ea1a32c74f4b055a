# Standard library imports
import os
from typing import Final, List, Optional


DEVELOPMENT_JWT_SECRET: Final[str] = "streetcats_development_fallback_secret_change_me"
SUPPORTED_JWT_ALGORITHMS: Final[tuple] = ("HS256", "HS384", "HS512")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    The JWT secret falls back to a fixed development value when unset; production
    deployments must provide JWT_SECRET_KEY.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "streetcats")

        # JWT Configuration
        configured_secret = os.getenv("JWT_SECRET_KEY")
        self.uses_fallback_secret: Final[bool] = not configured_secret
        self.jwt_secret_key: Final[str] = configured_secret or DEVELOPMENT_JWT_SECRET
        self.jwt_algorithm: Final[str] = _hmac_algorithm(os.getenv("JWT_ALGORITHM", "HS256"))
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

        # Runtime Configuration
        self.environment: Final[str] = os.getenv("APP_ENV", "production").lower()
        self.debug: Final[bool] = self.environment == "development"
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5500,http://127.0.0.1:5500",
            )
        )

        # Upload Configuration
        self.upload_dir: Final[str] = os.getenv("UPLOAD_DIR", "uploads")
        self.upload_max_mb: Final[int] = int(os.getenv("UPLOAD_MAX_MB", "5"))


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _hmac_algorithm(value: str) -> str:
    """Only shared-secret HMAC algorithms are accepted; anything else is a startup error"""
    algorithm = value.strip().upper()
    if algorithm not in SUPPORTED_JWT_ALGORITHMS:
        raise ValueError(
            f"Unsupported JWT_ALGORITHM {value!r}; use one of {', '.join(SUPPORTED_JWT_ALGORITHMS)}"
        )
    return algorithm


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
