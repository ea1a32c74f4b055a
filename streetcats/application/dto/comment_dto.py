from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...domain.models.comment import MAX_COMMENT_LENGTH
from .user_dto import AuthorSummary


class CommentCreateRequest(BaseModel):
    """DTO for comment creation request"""
    text: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value


class CommentResponse(BaseModel):
    """DTO for comment response"""
    id: str
    text: str
    cat_id: str
    author: AuthorSummary
    date: Optional[datetime] = None
