# Standard library imports
from typing import Dict, Iterable

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ..dto.user_dto import AuthorSummary


async def load_author_summaries(
    user_repository: UserRepository,
    author_ids: Iterable[str],
) -> Dict[str, AuthorSummary]:
    """
    Resolve author IDs to public author summaries in one lookup

    Args:
        user_repository: Credential store to read users from
        author_ids: IDs referenced by cats or comments

    Returns:
        Mapping from every requested ID to its summary; IDs with no live user
        map to a summary carrying only the ID
    """
    unique_ids = list(dict.fromkeys(author_ids))
    users = await user_repository.find_by_ids(unique_ids) if unique_ids else []
    found = {
        user.id: AuthorSummary(id=user.id, name=user.name, email=user.email)
        for user in users
        if user.id
    }
    return {author_id: found.get(author_id, AuthorSummary(id=author_id)) for author_id in unique_ids}
