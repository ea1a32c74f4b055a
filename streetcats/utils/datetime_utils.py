"""
Centralized DateTime Utilities
==============================

All timestamps stored by the backend are timezone-aware UTC datetimes.
MongoDB returns naive datetimes by default, so values read back are
normalized with ensure_utc().
"""
from datetime import datetime, timezone
from typing import Optional


def now() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes; aware ones are converted to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
