"""
Shared pytest fixtures for StreetCats tests.

Integration tests swap the global DI container for one backed by the
in-memory repositories below, so no MongoDB is needed.
"""
import os
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from streetcats.di.base_container import BaseContainer
from streetcats.di.container import register_use_cases
from streetcats.domain.exceptions import DuplicateEmailError
from streetcats.domain.models import Cat, Comment, User
from streetcats.domain.repositories import CatRepository, CommentRepository, UserRepository
from streetcats.infrastructure.storage.local_image_storage import LocalImageStorage
from streetcats.utils.datetime_utils import now


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        normalized = email.strip().lower()
        return next((u for u in self.users.values() if u.email == normalized), None)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def find_by_ids(self, user_ids: List[str]) -> List[User]:
        return [self.users[user_id] for user_id in user_ids if user_id in self.users]

    async def create(self, email: str, hashed_password: str, name: str) -> User:
        normalized = email.strip().lower()
        if any(u.email == normalized for u in self.users.values()):
            raise DuplicateEmailError()
        user = User(
            id=str(ObjectId()),
            name=name.strip(),
            email=normalized,
            hashed_password=hashed_password,
            created_at=now(),
        )
        self.users[user.id] = user
        return user


class InMemoryCatRepository(CatRepository):
    def __init__(self) -> None:
        self.cats: Dict[str, Cat] = {}

    async def find_by_id(self, cat_id: str) -> Optional[Cat]:
        return self.cats.get(cat_id)

    async def find_all(self) -> List[Cat]:
        return sorted(self.cats.values(), key=lambda cat: cat.date, reverse=True)

    async def save(self, cat: Cat) -> Cat:
        cat.id = str(ObjectId())
        if cat.date is None:
            cat.date = now()
        self.cats[cat.id] = cat
        return cat

    async def delete(self, cat_id: str) -> bool:
        return self.cats.pop(cat_id, None) is not None


class InMemoryCommentRepository(CommentRepository):
    def __init__(self) -> None:
        self.comments: Dict[str, Comment] = {}

    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        return self.comments.get(comment_id)

    async def find_by_cat(self, cat_id: str) -> List[Comment]:
        matching = [c for c in self.comments.values() if c.cat_id == cat_id]
        return sorted(matching, key=lambda comment: comment.date, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        comment.id = str(ObjectId())
        if comment.date is None:
            comment.date = now()
        self.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: str) -> bool:
        return self.comments.pop(comment_id, None) is not None

    async def delete_by_cat(self, cat_id: str) -> int:
        doomed = [cid for cid, c in self.comments.items() if c.cat_id == cat_id]
        for comment_id in doomed:
            del self.comments[comment_id]
        return len(doomed)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_streetcats",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only_0123456789",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret_with_enough_length_0123456789"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.debug = False
    mock.uses_fallback_secret = False

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("streetcats.core.config.get_settings", return_value=mock), patch(
        "streetcats.core.security.get_settings", return_value=mock
    ), patch("streetcats.api.v1.errors.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def container(upload_dir):
    """Container wired exactly like production, with in-memory repositories."""
    test_container = BaseContainer()
    test_container.register_singleton(UserRepository, InMemoryUserRepository())
    test_container.register_singleton(CatRepository, InMemoryCatRepository())
    test_container.register_singleton(CommentRepository, InMemoryCommentRepository())
    test_container.register_singleton(
        LocalImageStorage,
        LocalImageStorage(upload_dir=str(upload_dir), max_mb=1),
    )
    register_use_cases(test_container)
    return test_container


@pytest.fixture
def client(container, monkeypatch):
    """Test client for the real app with the in-memory container installed."""
    from streetcats.main import app

    monkeypatch.setattr("streetcats.di.container._container", container)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register_and_login(client):
    """Register a user, log in, and return (auth headers, user id)."""

    def _register_and_login(email: str, password: str = "secret1", name: str = "Tester"):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 201, response.text
        response = client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        data = response.json()
        return {"Authorization": f"Bearer {data['token']}"}, data["user"]["id"]

    return _register_and_login
