# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Location:
    """Geographic position of a sighting"""
    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180.0 <= self.lng <= 180.0:
            raise ValueError("Longitude must be between -180 and 180")


@dataclass
class Cat:
    """
    Pure domain model for a cat sighting.

    The author is the ID of the user who posted the sighting; it is set once
    at creation and never changes.
    """
    id: Optional[str]
    name: str
    description: str
    location: Location
    image: str
    author: str
    date: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.author:
            raise ValueError("Author is required")
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Cat name is required")
        if not self.description or len(self.description.strip()) < 1:
            raise ValueError("Description is required")
        if not self.image:
            raise ValueError("Image is required")
