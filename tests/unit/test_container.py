"""
Unit tests for the dependency injection container.
"""
import pytest

from streetcats.application.use_cases.auth.login_user import LoginUserUseCase
from streetcats.application.use_cases.cat.delete_cat import DeleteCatUseCase
from streetcats.di.base_container import BaseContainer
from streetcats.di.container import register_use_cases
from streetcats.di.providers.storage_provider import StorageProvider
from streetcats.infrastructure.storage.local_image_storage import LocalImageStorage


def test_unknown_key_raises_value_error():
    with pytest.raises(ValueError):
        BaseContainer().get(LoginUserUseCase)


def test_factories_build_fresh_instances(container):
    first = container.get(LoginUserUseCase)
    second = container.get(LoginUserUseCase)
    assert isinstance(first, LoginUserUseCase)
    assert first is not second


def test_delete_cat_uses_registered_image_storage(container, upload_dir):
    storage = container.get(LocalImageStorage)
    assert storage.upload_dir == upload_dir
    assert container.get(DeleteCatUseCase).image_storage is storage


def test_storage_provider_reads_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "photos"))
    monkeypatch.setenv("UPLOAD_MAX_MB", "3")
    monkeypatch.setattr("streetcats.core.config._settings", None)

    test_container = BaseContainer()
    StorageProvider.register(test_container)

    storage = test_container.get(LocalImageStorage)
    assert storage.upload_dir == tmp_path / "photos"
    assert storage.max_mb == 3


def test_cat_use_cases_do_not_register_storage():
    test_container = BaseContainer()
    register_use_cases(test_container)

    with pytest.raises(ValueError):
        test_container.get(LocalImageStorage)
