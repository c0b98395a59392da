"""
Exception hierarchy for the user API.

Raised by the domain model, repositories, the image store and the use
cases. Every expected failure inherits from UserApiError and carries a
short user-facing message; the API layer maps each class to an HTTP
status. Anything outside this hierarchy is treated as a server error.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserApiError(Exception):
    """Base exception for all expected user API failures."""

    default_user_message = "Request could not be processed."

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or self.default_user_message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(UserApiError):
    """Raised when a payload or a domain field fails a format rule."""

    default_user_message = "Validation failed"

    def __init__(
        self,
        message: str,
        violations: Optional[List[Any]] = None,
        user_message: Optional[str] = None,
    ):
        super().__init__(message, user_message=user_message)
        self.violations = list(violations or [])
        self.details = {"violations": [str(v) for v in self.violations]}


# -----------------------------------------------------------------------------
# Users
# -----------------------------------------------------------------------------


class DuplicateEmailError(UserApiError):
    """Raised when the email is already registered (uniqueness constraint)."""

    default_user_message = "Email already registered"


class UserNotFoundError(UserApiError):
    """Raised when no user matches the given email."""

    default_user_message = "User not found"


# -----------------------------------------------------------------------------
# Profile images
# -----------------------------------------------------------------------------


class InvalidImageFormatError(UserApiError):
    """Raised when an upload is not a JPEG, PNG or GIF image."""

    default_user_message = "Invalid file format. Only JPEG, PNG, and GIF are allowed."


class ImageTooLargeError(UserApiError):
    """Raised when an upload exceeds the configured size limit."""

    default_user_message = "File too large."


class ImageAlreadyExistsError(UserApiError):
    """Raised when the user already has a profile image attached."""

    default_user_message = "Image already exists for this user."
