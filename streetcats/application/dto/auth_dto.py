from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .user_dto import UserResponse


BCRYPT_MAX_PASSWORD_BYTES = 72


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=1, max_length=50)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return value


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()


class RegistrationResponse(BaseModel):
    """DTO for registration response"""
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    message: str = "User registered successfully"


class LoginResponse(BaseModel):
    """DTO for login response: bearer token plus the public user record"""
    token: str
    user: UserResponse
