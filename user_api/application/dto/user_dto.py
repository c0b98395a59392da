from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    """Accepts both the camelCase wire names and the python field names"""
    model_config = ConfigDict(populate_by_name=True)


class CreateUserRequest(_CamelModel):
    """DTO for user creation request"""
    email: Optional[str] = Field(default=None, examples=["johndoe@example.com"])
    full_name: Optional[str] = Field(default=None, alias="fullName", examples=["John Doe"])
    password: Optional[str] = Field(default=None, examples=["Password123!"])


class EditUserRequest(_CamelModel):
    """DTO for user edit request"""
    email: Optional[str] = Field(default=None, examples=["johndoe@example.com"])
    full_name: Optional[str] = Field(default=None, alias="fullName", examples=["John Doe"])
    password: Optional[str] = Field(default=None, examples=["Password123!"])


class DeleteUserRequest(_CamelModel):
    """DTO for user deletion request"""
    email: Optional[str] = Field(default=None, examples=["johndoe@example.com"])


class UserResponse(_CamelModel):
    """DTO for a listed user; password only present when exposure is enabled"""
    id: str
    full_name: str = Field(alias="fullName")
    email: str
    password: Optional[str] = None


class UserListResponse(BaseModel):
    """DTO for GET /user/getAll"""
    users: List[UserResponse]


class MessageResponse(BaseModel):
    """DTO for plain acknowledgement responses"""
    message: str


class ImageUploadResponse(_CamelModel):
    """DTO for a successful profile image upload"""
    message: str = "Image uploaded successfully."
    file_path: str = Field(alias="filePath")
