from .config import Settings, get_settings
from .security import (
    HashedPassword,
    hash_password,
    verify_password,
)

__all__ = [
    "Settings",
    "get_settings",
    "HashedPassword",
    "hash_password",
    "verify_password",
]
