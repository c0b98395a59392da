
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.image_store import ImageStore
from ...infrastructure.storage.local_image_store import LocalImageStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StorageProvider:
    """File storage provider - profile images on local disk"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()
        container.register_singleton(
            ImageStore,
            LocalImageStore(
                upload_dir=settings.image_upload_dir,
                url_prefix=settings.image_url_prefix,
                max_mb=settings.image_upload_max_mb,
            )
        )
