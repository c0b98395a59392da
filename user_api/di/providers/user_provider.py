
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.image_store import ImageStore
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.edit_user import EditUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.upload_user_image import UploadUserImageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user management use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            EditUserUseCase,
            lambda: EditUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            DeleteUserUseCase,
            lambda: DeleteUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository),
                include_password_hash=get_settings().list_include_password_hash,
            )
        )

        container.register_factory(
            UploadUserImageUseCase,
            lambda: UploadUserImageUseCase(
                user_repository=container.get(UserRepository),
                image_store=container.get(ImageStore),
            )
        )
