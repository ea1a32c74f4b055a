# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


MAX_COMMENT_LENGTH = 500


@dataclass
class Comment:
    """Pure domain model for a comment left on a cat sighting"""
    id: Optional[str]
    text: str
    cat_id: str
    author: str
    date: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.author:
            raise ValueError("Author is required")
        if not self.cat_id:
            raise ValueError("Cat ID is required")
        if not self.text or len(self.text.strip()) < 1:
            raise ValueError("Comment text is required")
        if len(self.text) > MAX_COMMENT_LENGTH:
            raise ValueError(f"Comment must be at most {MAX_COMMENT_LENGTH} characters")
