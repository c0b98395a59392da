"""Constants for domain model field names and upload rules"""

from .user_fields import UserFields
from .media_constants import (
    ALLOWED_IMAGE_FORMATS,
    ALLOWED_IMAGE_MIME,
    BYTES_PER_MB,
    NAME_COLLISION_RETRIES,
    UPLOAD_CHUNK_SIZE,
)

__all__ = [
    "UserFields",
    "ALLOWED_IMAGE_FORMATS",
    "ALLOWED_IMAGE_MIME",
    "BYTES_PER_MB",
    "NAME_COLLISION_RETRIES",
    "UPLOAD_CHUNK_SIZE",
]
