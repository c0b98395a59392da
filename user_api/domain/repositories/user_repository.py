from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_all(self, include_password: bool = False) -> List[User]:
        """List every user; the password hash is left out unless requested"""
        pass

    @abstractmethod
    async def find_by_email(self, email: str, include_password: bool = False) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Remove user permanently"""
        pass

    @abstractmethod
    async def set_image_path_if_absent(self, email: str, image_path: str) -> bool:
        """Attach an image path only if none is set yet; False if one already was"""
        pass

    async def ensure_indexes(self) -> None:
        """Create storage-side constraints; no-op by default"""
        return None
