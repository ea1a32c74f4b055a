"""
Unit tests for cat use cases.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from streetcats.application.dto.cat_dto import CatCreateRequest
from streetcats.application.dto.user_dto import UserResponse
from streetcats.application.use_cases.cat.create_cat import CreateCatUseCase
from streetcats.application.use_cases.cat.delete_cat import DeleteCatUseCase
from streetcats.application.use_cases.cat.get_cat import GetCatUseCase
from streetcats.application.use_cases.cat.list_cats import ListCatsUseCase
from streetcats.domain.exceptions import ForbiddenError, NotFoundError
from streetcats.domain.models import Cat, Location, User


ANN = UserResponse(id="usr-ann", email="ann@example.com", name="Ann")
BOB = UserResponse(id="usr-bob", email="bob@example.com", name="Bob")


def make_cat(cat_id="cat-1", author="usr-ann", image="tom.jpg"):
    return Cat(
        id=cat_id,
        name="Tom",
        description="Orange tabby",
        location=Location(lat=40.85, lng=14.27),
        image=image,
        author=author,
        date=datetime(2024, 5, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_cat_repo():
    return AsyncMock()


@pytest.fixture
def mock_user_repo():
    return AsyncMock()


@pytest.fixture
def mock_comment_repo():
    return AsyncMock()


class TestCreateCatUseCase:

    @pytest.mark.asyncio
    async def test_create_sets_author_from_identity(self, mock_cat_repo):
        async def save(cat):
            cat.id = "cat-new"
            return cat

        mock_cat_repo.save.side_effect = save
        use_case = CreateCatUseCase(mock_cat_repo)

        result = await use_case.execute(
            request=CatCreateRequest(name=" Tom ", description="Orange", lat=40.0, lng=14.0),
            image_filename="abc.jpg",
            author=ANN,
        )

        saved = mock_cat_repo.save.call_args.args[0]
        assert saved.author == "usr-ann"
        assert saved.name == "Tom"
        assert result.id == "cat-new"
        assert result.author.name == "Ann"
        assert result.image_url == "/uploads/abc.jpg"


class TestCatRequestValidation:

    @pytest.mark.parametrize(
        "fields",
        [
            {"name": "", "description": "d", "lat": 1, "lng": 1},
            {"name": "Tom", "description": "   ", "lat": 1, "lng": 1},
            {"name": "Tom", "description": "d", "lat": 91, "lng": 1},
            {"name": "Tom", "description": "d", "lat": 1, "lng": -181},
            {"name": "Tom", "description": "d", "lat": "north", "lng": 1},
        ],
    )
    def test_invalid_fields_rejected(self, fields):
        with pytest.raises(ValueError):
            CatCreateRequest(**fields)


class TestListAndGetCats:

    @pytest.mark.asyncio
    async def test_list_populates_authors(self, mock_cat_repo, mock_user_repo):
        mock_cat_repo.find_all.return_value = [
            make_cat("cat-1", author="usr-ann"),
            make_cat("cat-2", author="usr-gone"),
        ]
        mock_user_repo.find_by_ids.return_value = [
            User(id="usr-ann", name="Ann", email="ann@example.com", hashed_password="h")
        ]

        result = await ListCatsUseCase(mock_cat_repo, mock_user_repo).execute()

        assert [cat.id for cat in result] == ["cat-1", "cat-2"]
        assert result[0].author.name == "Ann"
        assert result[1].author.id == "usr-gone"
        assert result[1].author.name is None
        mock_user_repo.find_by_ids.assert_awaited_once_with(["usr-ann", "usr-gone"])

    @pytest.mark.asyncio
    async def test_get_missing_cat_raises(self, mock_cat_repo, mock_user_repo):
        mock_cat_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await GetCatUseCase(mock_cat_repo, mock_user_repo).execute("nope")


class TestDeleteCatUseCase:

    @pytest.mark.asyncio
    async def test_owner_deletes_cat_comments_and_image(self, mock_cat_repo, mock_comment_repo):
        mock_cat_repo.find_by_id.return_value = make_cat()
        mock_comment_repo.delete_by_cat.return_value = 2
        storage = MagicMock()

        await DeleteCatUseCase(mock_cat_repo, mock_comment_repo, storage).execute("cat-1", ANN)

        mock_cat_repo.delete.assert_awaited_once_with("cat-1")
        mock_comment_repo.delete_by_cat.assert_awaited_once_with("cat-1")
        storage.delete.assert_called_once_with("tom.jpg")

    @pytest.mark.asyncio
    async def test_non_owner_is_forbidden_and_nothing_deleted(self, mock_cat_repo, mock_comment_repo):
        mock_cat_repo.find_by_id.return_value = make_cat()
        storage = MagicMock()

        with pytest.raises(ForbiddenError):
            await DeleteCatUseCase(mock_cat_repo, mock_comment_repo, storage).execute("cat-1", BOB)

        mock_cat_repo.delete.assert_not_awaited()
        mock_comment_repo.delete_by_cat.assert_not_awaited()
        storage.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_cat_raises_not_found(self, mock_cat_repo, mock_comment_repo):
        mock_cat_repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await DeleteCatUseCase(mock_cat_repo, mock_comment_repo).execute("cat-1", ANN)
