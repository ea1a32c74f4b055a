from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...infrastructure.storage.local_image_storage import LocalImageStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StorageProvider:
    """File storage provider - registers the local image store for cat photos"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()
        container.register_singleton(
            LocalImageStorage,
            LocalImageStorage(upload_dir=settings.upload_dir, max_mb=settings.upload_max_mb)
        )
