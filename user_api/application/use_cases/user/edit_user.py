# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ....core.security import HashedPassword
from ...dto.user_dto import EditUserRequest, MessageResponse
from ...validation.user_rules import EDIT_USER_RULES, ensure_valid, normalize_email

logger = logging.getLogger(__name__)


class EditUserUseCase:
    """Use case for changing an existing user's full name and password"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: EditUserRequest) -> MessageResponse:
        """
        Overwrite full name and password of the user identified by email

        Raises:
            ValidationError: If any field fails its rule
            UserNotFoundError: If no user has this email
        """
        ensure_valid(
            {"email": request.email, "fullName": request.full_name, "password": request.password},
            EDIT_USER_RULES,
        )
        email = normalize_email(request.email)

        user = await self.user_repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError(f"No user with email {email}")

        user.full_name = request.full_name
        user.password = await HashedPassword.from_plaintext(request.password)

        await self.user_repository.save(user)
        logger.info("Updated user %s", user.id)

        return MessageResponse(message="User updated successfully.")
