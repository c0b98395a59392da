# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import DuplicateEmailError
from ....core.security import HashedPassword
from ...dto.user_dto import CreateUserRequest, MessageResponse
from ...validation.user_rules import CREATE_USER_RULES, ensure_valid, normalize_email

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: CreateUserRequest) -> MessageResponse:
        """
        Create a new user

        Args:
            request: Creation request with email, full name and password

        Returns:
            MessageResponse acknowledging the creation

        Raises:
            ValidationError: If any field fails its rule
            DuplicateEmailError: If the email is already registered
        """
        ensure_valid(
            {"email": request.email, "fullName": request.full_name, "password": request.password},
            CREATE_USER_RULES,
        )
        email = normalize_email(request.email)

        # Advisory only: the unique index decides when two requests race
        existing_user = await self.user_repository.find_by_email(email)
        if existing_user is not None:
            raise DuplicateEmailError(f"User with email {email} already exists")

        new_user = User(
            id=None,  # Will be set by repository
            full_name=request.full_name,
            email=email,
            password=await HashedPassword.from_plaintext(request.password),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info("Created user %s (%s)", saved_user.id, saved_user.email)

        return MessageResponse(message="User created successfully")
