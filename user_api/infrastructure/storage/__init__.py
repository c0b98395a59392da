from .local_image_store import LocalImageStore

__all__ = ["LocalImageStore"]
