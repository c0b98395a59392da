# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import DeleteUserRequest, MessageResponse
from ...validation.user_rules import DELETE_USER_RULES, ensure_valid, normalize_email

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for permanently removing a user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: DeleteUserRequest) -> MessageResponse:
        ensure_valid({"email": request.email}, DELETE_USER_RULES)
        email = normalize_email(request.email)

        user = await self.user_repository.find_by_email(email)
        if user is None:
            raise UserNotFoundError(f"No user with email {email}")

        await self.user_repository.delete(user)
        logger.info("Deleted user %s", user.id)

        return MessageResponse(message="User deletion successful.")
