# Standard library imports
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.security import HashedPassword
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import DuplicateEmailError, UserNotFoundError
from .mongo_connection import get_user_collection


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def ensure_indexes(self) -> None:
        """Create the unique email index that guards against duplicate accounts"""
        await self.user_collection.create_index(
            UserFields.EMAIL,
            unique=True,
            name=UserFields.EMAIL_UNIQUE_INDEX,
        )

    async def find_all(self, include_password: bool = False) -> List[User]:
        """
        List all users

        Args:
            include_password: Also read the password hash

        Returns:
            List of User domain models, possibly empty
        """
        try:
            cursor = self.user_collection.find({}, self._projection(include_password))
            documents = await cursor.to_list(length=None)
        except Exception as e:
            raise RuntimeError(f"Error listing users: {str(e)}")
        return [self._document_to_user(document) for document in documents]

    async def find_by_email(self, email: str, include_password: bool = False) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Normalized email address to search for
            include_password: Also read the password hash

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one(
                {UserFields.EMAIL: email},
                self._projection(include_password),
            )
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            DuplicateEmailError: If another document already has this email
            UserNotFoundError: If an update matched no document
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)

        try:
            if user.id:
                try:
                    object_id = ObjectId(user.id)
                except (InvalidId, TypeError):
                    raise ValueError(f"Invalid user ID format: {user.id}")

                # imagePath only changes through set_image_path_if_absent
                user_dict.pop(UserFields.IMAGE_PATH, None)
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise UserNotFoundError(f"User with ID {user.id} not found")
                user_id = object_id
            else:
                if user.password is None:
                    raise ValueError("A new user needs a password")
                result = await self.user_collection.insert_one(user_dict)
                user_id = result.inserted_id
        except DuplicateKeyError:
            raise DuplicateEmailError(f"Email {user.email} is already registered")
        except (ValueError, UserNotFoundError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

        return User(
            id=str(user_id),
            full_name=user.full_name,
            email=user.email,
            password=user.password,
            image_path=user.image_path,
        )

    async def delete(self, user: User) -> None:
        """
        Delete user permanently

        Raises:
            UserNotFoundError: If no document was removed
        """
        try:
            query = {UserFields.MONGO_ID: ObjectId(user.id)} if user.id else {UserFields.EMAIL: user.email}
        except (InvalidId, TypeError):
            raise UserNotFoundError(f"User with ID {user.id} not found")

        try:
            result = await self.user_collection.delete_one(query)
        except Exception as e:
            raise RuntimeError(f"Error deleting user: {str(e)}")
        if result.deleted_count == 0:
            raise UserNotFoundError(f"User {user.email} not found")

    async def set_image_path_if_absent(self, email: str, image_path: str) -> bool:
        """
        Set imagePath in a single conditional update

        Returns:
            True if the path was attached, False if the user already had one
            (or disappeared in the meantime)
        """
        try:
            result = await self.user_collection.update_one(
                {UserFields.EMAIL: email, UserFields.IMAGE_PATH: None},
                {"$set": {UserFields.IMAGE_PATH: image_path}},
            )
        except Exception as e:
            raise RuntimeError(f"Error attaching image: {str(e)}")
        return result.modified_count == 1

    @staticmethod
    def _projection(include_password: bool) -> Optional[dict]:
        if include_password:
            return None
        return {UserFields.PASSWORD: 0}

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        stored_hash = document.get(UserFields.PASSWORD)
        return User(
            id=str(document[UserFields.MONGO_ID]),
            full_name=document.get(UserFields.FULL_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password=HashedPassword(stored_hash) if stored_hash else None,
            image_path=document.get(UserFields.IMAGE_PATH),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document fields

        The password is only written when the model carries one, so a user
        read without the password projection never loses its hash on update.
        """
        user_dict = {
            UserFields.FULL_NAME: user.full_name,
            UserFields.EMAIL: user.email,
            UserFields.IMAGE_PATH: user.image_path,
        }
        if user.password is not None:
            user_dict[UserFields.PASSWORD] = user.password.value
        return user_dict
