import re
from dataclasses import dataclass
from typing import Optional

from ...core.security import HashedPassword
from ..exceptions import ValidationError


FULL_NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
EMAIL_SHAPE_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class User:
    """Domain model for a user account.

    ``password`` is None when the record was read without the password
    projection; when set it is always a HashedPassword.
    """
    id: Optional[str]
    full_name: str
    email: str
    password: Optional[HashedPassword] = None
    image_path: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if not self.full_name or not FULL_NAME_PATTERN.match(self.full_name):
            raise ValidationError("Full name may contain letters and spaces only")
        if not self.email or not EMAIL_SHAPE_PATTERN.match(self.email):
            raise ValidationError("Invalid email format")
        if self.password is not None and not isinstance(self.password, HashedPassword):
            raise ValidationError("Password must be stored as a hash")

    @property
    def has_image(self) -> bool:
        return bool(self.image_path)
