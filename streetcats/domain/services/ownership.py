"""Ownership checks for user-authored resources (cats, comments)."""

# Standard library imports
import logging
from typing import Any

# Local application imports
from ..exceptions import ForbiddenError

logger = logging.getLogger(__name__)


def check_ownership(resource: Any, identity: Any) -> bool:
    """
    Check whether identity authored resource

    Args:
        resource: Any object with an `author` attribute holding a user ID
        identity: Any object with an `id` attribute (the authenticated user)

    Returns:
        True if the IDs match once both are normalized to strings
    """
    return str(resource.author) == str(identity.id)


def ensure_ownership(resource: Any, identity: Any) -> None:
    """Raise ForbiddenError unless identity authored resource"""
    if not check_ownership(resource, identity):
        logger.warning(
            f"Ownership check failed: resource {getattr(resource, 'id', None)} "
            f"authored by {resource.author}, requested by {identity.id}"
        )
        raise ForbiddenError()
