from typing import Optional

from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    email: str
    name: str


class AuthorSummary(BaseModel):
    """Author details embedded in cat and comment responses"""
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
