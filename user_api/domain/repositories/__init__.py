from .user_repository import UserRepository
from .image_store import ImageStore, StoredImage, UploadedImage

__all__ = ["UserRepository", "ImageStore", "StoredImage", "UploadedImage"]
