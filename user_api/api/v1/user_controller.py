"""
User management API.

Endpoints (mounted under /user):
  POST   /create       create a user
  PUT    /edit         change full name and password
  DELETE /delete       remove a user
  GET    /getAll       list users
  POST   /uploadImage  attach a profile image (multipart, once per user)

Expected failures arrive as UserApiError subclasses and are mapped to a
4xx with their short message. Anything else is logged and answered 500
with a generic message.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import logging
from typing import Dict, NoReturn, Optional, Type

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...application.dto.user_dto import (
    CreateUserRequest,
    DeleteUserRequest,
    EditUserRequest,
    ImageUploadResponse,
    MessageResponse,
    UserListResponse,
)
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...application.use_cases.user.edit_user import EditUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.upload_user_image import UploadUserImageUseCase
from ...di.container import get_container
from ...domain.exceptions import (
    DuplicateEmailError,
    ImageAlreadyExistsError,
    ImageTooLargeError,
    InvalidImageFormatError,
    UserApiError,
    UserNotFoundError,
    ValidationError,
)
from ...domain.repositories.image_store import UploadedImage

logger = logging.getLogger(__name__)
router = APIRouter(tags=["User"])

ERROR_STATUS: Dict[Type[UserApiError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DuplicateEmailError: status.HTTP_400_BAD_REQUEST,
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidImageFormatError: status.HTTP_400_BAD_REQUEST,
    ImageTooLargeError: status.HTTP_400_BAD_REQUEST,
    ImageAlreadyExistsError: status.HTTP_400_BAD_REQUEST,
}


def _raise_http(exception: Exception, operation: str, server_message: str) -> NoReturn:
    """Translate a failure into an HTTPException; unknown ones become 500."""
    if isinstance(exception, UserApiError):
        status_code = next(
            (code for cls, code in ERROR_STATUS.items() if isinstance(exception, cls)),
            status.HTTP_400_BAD_REQUEST,
        )
        logger.warning("%s %d: %s", operation, status_code, exception.message)
        raise HTTPException(status_code=status_code, detail=exception.user_message)

    logger.exception("%s 500: %s", operation, exception)
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=server_message,
    )


@router.post(
    "/create",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createUser",
    summary="Create a new user",
    responses={400: {"description": "Validation failed or email already registered"}},
)
async def create_user(request: CreateUserRequest) -> MessageResponse:
    """
    Create a new user by providing email, full name, and password.
    """
    try:
        use_case = get_container().get(CreateUserUseCase)
        return await use_case.execute(request)
    except Exception as exception:
        _raise_http(exception, "create user", "User creation failed")


@router.put(
    "/edit",
    response_model=MessageResponse,
    operation_id="editUser",
    summary="Edit an existing user",
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "User not found"},
    },
)
async def edit_user(request: EditUserRequest) -> MessageResponse:
    """
    Change the full name and password of the user with the given email.
    """
    try:
        use_case = get_container().get(EditUserUseCase)
        return await use_case.execute(request)
    except Exception as exception:
        _raise_http(exception, "edit user", "User update failed")


@router.delete(
    "/delete",
    response_model=MessageResponse,
    operation_id="deleteUser",
    summary="Delete an existing user",
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "User not found"},
    },
)
async def delete_user(request: DeleteUserRequest) -> MessageResponse:
    """
    Permanently delete the user with the given email.
    """
    try:
        use_case = get_container().get(DeleteUserUseCase)
        return await use_case.execute(request)
    except Exception as exception:
        _raise_http(exception, "delete user", "User deletion failed")


@router.get(
    "/getAll",
    response_model=UserListResponse,
    response_model_exclude_none=True,
    operation_id="getAllUsers",
    summary="List all users",
)
async def get_all_users() -> UserListResponse:
    try:
        use_case = get_container().get(ListUsersUseCase)
        return await use_case.execute()
    except Exception as exception:
        _raise_http(exception, "list users", "Server error")


@router.post(
    "/uploadImage",
    response_model=ImageUploadResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="uploadImage",
    summary="Upload a profile image",
    responses={
        400: {"description": "Validation failed, invalid format or image already exists"},
        404: {"description": "User not found"},
    },
)
async def upload_image(
    email: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
) -> ImageUploadResponse:
    """
    Attach a JPEG, PNG or GIF image (max 5 MB) to the user with the given
    email. A user can only receive one image.
    """
    upload = None
    if image is not None:
        upload = UploadedImage(
            filename=image.filename or "",
            content_type=image.content_type,
            read=image.read,
            size=image.size,
        )

    try:
        use_case = get_container().get(UploadUserImageUseCase)
        return await use_case.execute(email, upload)
    except Exception as exception:
        _raise_http(exception, "upload image", "Server error.")
    finally:
        if image is not None:
            await image.close()
