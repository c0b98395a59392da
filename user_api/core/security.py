# Standard library imports
import asyncio
import re
from dataclasses import dataclass

# External package imports
import bcrypt

# Local application imports
from .config import get_settings


BCRYPT_HASH_PATTERN = re.compile(r"^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}$")


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    The work factor comes from settings and is the same for every call;
    the salt is fresh each time.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


@dataclass(frozen=True)
class HashedPassword:
    """
    A password as it may be persisted: always a bcrypt hash.

    Use ``await HashedPassword.from_plaintext(...)`` for user input.
    Calling the constructor directly is only for rehydrating a hash read
    back from storage, and it refuses anything that is not a bcrypt hash.
    """
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not BCRYPT_HASH_PATTERN.match(self.value):
            raise ValueError("HashedPassword requires a bcrypt hash, not plaintext")

    @classmethod
    async def from_plaintext(cls, plain_password: str) -> "HashedPassword":
        # bcrypt is CPU bound; keep it off the event loop
        hashed = await asyncio.to_thread(hash_password, plain_password)
        return cls(hashed)

    def matches(self, plain_password: str) -> bool:
        return verify_password(plain_password, self.value)

    def __str__(self) -> str:
        return self.value
