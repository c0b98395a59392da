"""
Profile image storage on the local filesystem.

Files land flat in one directory under ``<epoch ms>-<original name>``.
When that name is already taken a random suffix is inserted, and an
existing file is never opened for writing. The declared content type
must be JPEG, PNG or GIF, and the written file must decode as one of
those formats. Uploads are written in chunks and counted as they go;
anything over the limit or undecodable is removed again.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import asyncio
import logging
import time
import uuid
from pathlib import Path
from typing import BinaryIO, Tuple

# -----------------------------------------------------------------------------
# External
# -----------------------------------------------------------------------------
from PIL import Image

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...domain.constants import (
    ALLOWED_IMAGE_FORMATS,
    ALLOWED_IMAGE_MIME,
    BYTES_PER_MB,
    NAME_COLLISION_RETRIES,
    UPLOAD_CHUNK_SIZE,
)
from ...domain.exceptions import ImageTooLargeError, InvalidImageFormatError
from ...domain.repositories.image_store import ImageStore, StoredImage, UploadedImage

logger = logging.getLogger(__name__)


def safe_file_name(filename: str) -> str:
    """Basename only, so a client cannot write outside the upload directory."""
    name = Path(filename.replace("\\", "/")).name.strip()
    return name or "image"


def verify_image_file(path: Path) -> str:
    """
    Decode the header and run Pillow's integrity check on a stored file.

    Returns:
        Pillow format name (JPEG, PNG or GIF)

    Raises:
        InvalidImageFormatError: Not decodable, corrupt or another format
    """
    try:
        with Image.open(path) as img:
            image_format = img.format
            img.verify()
    except Exception as e:
        raise InvalidImageFormatError(f"{path.name} is not a valid image: {e}") from e

    if image_format not in ALLOWED_IMAGE_FORMATS:
        raise InvalidImageFormatError(f"{path.name} decoded as unsupported format {image_format}")
    return image_format


class LocalImageStore(ImageStore):
    """ImageStore writing into a flat content directory"""

    def __init__(self, upload_dir: str, url_prefix: str = "/images", max_mb: int = 5) -> None:
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_mb = max_mb
        self.max_bytes = max_mb * BYTES_PER_MB

    def check_declared(self, upload: UploadedImage) -> None:
        if upload.size is not None and upload.size > self.max_bytes:
            raise ImageTooLargeError(
                f"Declared size {upload.size} exceeds {self.max_bytes} bytes",
                user_message=f"File too large. Max {self.max_mb} MB.",
            )
        content_type = (upload.content_type or "").split(";")[0].strip().lower()
        if content_type not in ALLOWED_IMAGE_MIME:
            raise InvalidImageFormatError(f"Rejected content type {content_type!r}")

    def _create_file(self, filename: str) -> Tuple[str, Path, BinaryIO]:
        """
        Exclusively create a new file for the upload.

        Tries ``<ms>-<name>`` first, then ``<ms>-<random>-<name>``.
        """
        millis = int(time.time() * 1000)
        basename = safe_file_name(filename)

        candidates = [f"{millis}-{basename}"]
        candidates += [f"{millis}-{uuid.uuid4().hex[:8]}-{basename}" for _ in range(NAME_COLLISION_RETRIES)]

        for generated_name in candidates:
            path = self.upload_dir / generated_name
            try:
                return generated_name, path, open(path, "xb")
            except FileExistsError:
                logger.debug("Image name %s already taken", generated_name)

        raise FileExistsError(f"No free file name for {basename!r} in {self.upload_dir}")

    async def save(self, upload: UploadedImage) -> StoredImage:
        """
        Write the upload to disk

        Returns:
            StoredImage with the filesystem path and the public URL path

        Raises:
            InvalidImageFormatError: Wrong declared type, empty, or not a JPEG/PNG/GIF
            ImageTooLargeError: More than the configured number of MB
        """
        self.check_declared(upload)

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        generated_name, final_path, f = self._create_file(upload.filename)

        # final_path was created by this call
        size = 0
        try:
            with f:
                while True:
                    chunk = await upload.read(UPLOAD_CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise ImageTooLargeError(
                            f"Upload exceeded {self.max_bytes} bytes",
                            user_message=f"File too large. Max {self.max_mb} MB.",
                        )
                    f.write(chunk)
            if size == 0:
                raise InvalidImageFormatError(f"{upload.filename!r} is empty")
            image_format = await asyncio.to_thread(verify_image_file, final_path)
        except BaseException:
            final_path.unlink(missing_ok=True)
            raise

        logger.debug("Stored %s image %s (%d bytes)", image_format, final_path, size)
        return StoredImage(
            path=str(final_path),
            generated_name=generated_name,
            public_path=f"{self.url_prefix}/{generated_name}",
            size=size,
        )

    def remove(self, stored: StoredImage) -> None:
        try:
            Path(stored.path).unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove stored image %s: %s", stored.path, e)
