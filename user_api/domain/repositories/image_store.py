from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional


@dataclass
class UploadedImage:
    """Framework-neutral description of an incoming file upload"""
    filename: str
    content_type: Optional[str]
    read: Callable[[int], Awaitable[bytes]]
    size: Optional[int] = None


@dataclass(frozen=True)
class StoredImage:
    """A file that has been written to image storage"""
    path: str
    generated_name: str
    public_path: str
    size: int


class ImageStore(ABC):
    """Storage interface for profile images"""

    @abstractmethod
    def check_declared(self, upload: UploadedImage) -> None:
        """Reject on declared content type or declared size, before any I/O"""
        pass

    @abstractmethod
    async def save(self, upload: UploadedImage) -> StoredImage:
        """Validate and persist the upload under a generated unique name"""
        pass

    @abstractmethod
    def remove(self, stored: StoredImage) -> None:
        """Delete a previously stored file"""
        pass
