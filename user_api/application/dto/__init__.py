from .user_dto import (
    CreateUserRequest,
    DeleteUserRequest,
    EditUserRequest,
    ImageUploadResponse,
    MessageResponse,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "DeleteUserRequest",
    "EditUserRequest",
    "ImageUploadResponse",
    "MessageResponse",
    "UserListResponse",
    "UserResponse",
]
