# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserListResponse, UserResponse


class ListUsersUseCase:
    """Use case for listing every user"""

    def __init__(self, user_repository: UserRepository, include_password_hash: bool = False) -> None:
        self.user_repository = user_repository
        self.include_password_hash = include_password_hash

    async def execute(self) -> UserListResponse:
        """
        List users with full name and email

        The password hash is only included when include_password_hash is
        set (LIST_INCLUDE_PASSWORD_HASH), for clients that relied on it.
        """
        users = await self.user_repository.find_all(include_password=self.include_password_hash)
        return UserListResponse(
            users=[
                UserResponse(
                    id=user.id or "",
                    full_name=user.full_name,
                    email=user.email,
                    password=(
                        user.password.value
                        if self.include_password_hash and user.password is not None
                        else None
                    ),
                )
                for user in users
            ]
        )
