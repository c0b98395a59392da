from .user import (
    CreateUserUseCase,
    EditUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
    UploadUserImageUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "EditUserUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
    "UploadUserImageUseCase",
]
