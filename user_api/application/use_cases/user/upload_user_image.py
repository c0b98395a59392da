# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.image_store import ImageStore, UploadedImage
from ....domain.exceptions import (
    ImageAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from ...dto.user_dto import ImageUploadResponse
from ...validation.user_rules import UPLOAD_IMAGE_RULES, Violation, ensure_valid, normalize_email

logger = logging.getLogger(__name__)


class UploadUserImageUseCase:
    """Use case for attaching a profile image to a user (once)"""

    def __init__(self, user_repository: UserRepository, image_store: ImageStore) -> None:
        self.user_repository = user_repository
        self.image_store = image_store

    async def execute(self, email: Optional[str], upload: Optional[UploadedImage]) -> ImageUploadResponse:
        """
        Store the uploaded image and record its path on the user

        The user's imagePath is only set after the file is fully written,
        and only if it was still empty at that moment. A request that loses
        that race gets its file removed again.

        Raises:
            ValidationError: If the email is malformed or no file was sent
            InvalidImageFormatError: If the file is not JPEG, PNG or GIF
            ImageTooLargeError: If the file exceeds the size limit
            UserNotFoundError: If no user has this email
            ImageAlreadyExistsError: If the user already has an image
        """
        ensure_valid({"email": email}, UPLOAD_IMAGE_RULES)
        if upload is None or not upload.filename:
            raise ValidationError("Validation failed", violations=[Violation("image", "file is required")])
        self.image_store.check_declared(upload)

        email = normalize_email(email)
        user = await self.user_repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError(f"No user with email {email}")
        if user.has_image:
            raise ImageAlreadyExistsError(f"User {user.id} already has an image")

        stored = await self.image_store.save(upload)
        try:
            attached = await self.user_repository.set_image_path_if_absent(email, stored.path)
        except Exception:
            self.image_store.remove(stored)
            raise

        if not attached:
            self.image_store.remove(stored)
            raise ImageAlreadyExistsError(f"User {user.id} received another image concurrently")

        logger.info("Attached image %s to user %s", stored.generated_name, user.id)
        return ImageUploadResponse(file_path=stored.public_path)
