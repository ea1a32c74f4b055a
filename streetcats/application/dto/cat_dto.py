from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .user_dto import AuthorSummary


class LocationSchema(BaseModel):
    """Geographic coordinates of a sighting"""
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class CatCreateRequest(BaseModel):
    """DTO for cat creation (the multipart form fields besides the image)"""
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=1000)
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value


class CatResponse(BaseModel):
    """DTO for cat response"""
    id: str
    name: str
    description: str
    location: LocationSchema
    image: str
    image_url: str
    author: AuthorSummary
    date: Optional[datetime] = None
