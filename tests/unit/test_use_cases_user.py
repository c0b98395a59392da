"""
Unit tests for user use cases (Create, Edit, Delete, List, UploadImage).
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from user_api.core.security import HashedPassword, hash_password
from user_api.application.dto.user_dto import (
    CreateUserRequest,
    DeleteUserRequest,
    EditUserRequest,
)
from user_api.application.use_cases.user.create_user import CreateUserUseCase
from user_api.application.use_cases.user.delete_user import DeleteUserUseCase
from user_api.application.use_cases.user.edit_user import EditUserUseCase
from user_api.application.use_cases.user.list_users import ListUsersUseCase
from user_api.application.use_cases.user.upload_user_image import UploadUserImageUseCase
from user_api.domain.exceptions import (
    DuplicateEmailError,
    ImageAlreadyExistsError,
    InvalidImageFormatError,
    UserNotFoundError,
    ValidationError,
)
from user_api.domain.models.user import User
from user_api.domain.repositories.image_store import ImageStore, StoredImage, UploadedImage


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    repo.save.side_effect = lambda user: user
    return repo


@pytest.fixture
def stored_hash(mock_settings):
    return HashedPassword(hash_password("OldPassword1!"))


def make_user(stored_hash, **overrides):
    fields = dict(
        id="usr-1",
        full_name="Existing User",
        email="a@b.com",
        password=stored_hash,
        image_path=None,
    )
    fields.update(overrides)
    return User(**fields)


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_success_hashes_password(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = None

        use_case = CreateUserUseCase(mock_user_repo)
        result = await use_case.execute(
            CreateUserRequest(email="A@B.com", full_name="A B", password="Password1!")
        )

        assert result.message == "User created successfully"
        mock_user_repo.find_by_email.assert_awaited_once_with("a@b.com")
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.id is None
        assert saved.email == "a@b.com"
        assert saved.password.value != "Password1!"
        assert saved.password.matches("Password1!")

    @pytest.mark.asyncio
    async def test_create_duplicate_email_raises(self, mock_user_repo, stored_hash):
        mock_user_repo.find_by_email.return_value = make_user(stored_hash)

        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(DuplicateEmailError):
            await use_case.execute(
                CreateUserRequest(email="a@b.com", full_name="A B", password="Password1!")
            )
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_race_surfaces_as_duplicate(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.side_effect = DuplicateEmailError("duplicate key")

        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(DuplicateEmailError):
            await use_case.execute(
                CreateUserRequest(email="a@b.com", full_name="A B", password="Password1!")
            )

    @pytest.mark.asyncio
    async def test_create_weak_password_never_touches_storage(self, mock_user_repo):
        use_case = CreateUserUseCase(mock_user_repo)
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateUserRequest(email="a@b.com", full_name="A B", password="password1")
            )
        mock_user_repo.find_by_email.assert_not_called()
        mock_user_repo.save.assert_not_called()


class TestEditUserUseCase:
    """Tests for EditUserUseCase"""

    @pytest.mark.asyncio
    async def test_edit_overwrites_name_and_password(self, mock_user_repo, stored_hash):
        mock_user_repo.find_by_email.return_value = make_user(stored_hash)

        use_case = EditUserUseCase(mock_user_repo)
        result = await use_case.execute(
            EditUserRequest(email="a@b.com", full_name="New Name", password="NewPassword1!")
        )

        assert result.message == "User updated successfully."
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.full_name == "New Name"
        assert saved.password.matches("NewPassword1!")
        assert not saved.password.matches("OldPassword1!")

    @pytest.mark.asyncio
    async def test_edit_unknown_email_raises_not_found(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None

        use_case = EditUserUseCase(mock_user_repo)
        with pytest.raises(UserNotFoundError):
            await use_case.execute(
                EditUserRequest(email="ghost@b.com", full_name="Ghost", password="Password1!")
            )
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_edit_invalid_name_rejected(self, mock_user_repo):
        use_case = EditUserUseCase(mock_user_repo)
        with pytest.raises(ValidationError):
            await use_case.execute(
                EditUserRequest(email="a@b.com", full_name="R2D2", password="Password1!")
            )


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase"""

    @pytest.mark.asyncio
    async def test_delete_success(self, mock_user_repo, stored_hash):
        user = make_user(stored_hash)
        mock_user_repo.find_by_email.return_value = user

        use_case = DeleteUserUseCase(mock_user_repo)
        result = await use_case.execute(DeleteUserRequest(email="a@b.com"))

        assert result.message == "User deletion successful."
        mock_user_repo.delete.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_delete_unknown_email_raises(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None

        use_case = DeleteUserUseCase(mock_user_repo)
        with pytest.raises(UserNotFoundError):
            await use_case.execute(DeleteUserRequest(email="ghost@b.com"))
        mock_user_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_invalid_email_rejected(self, mock_user_repo):
        use_case = DeleteUserUseCase(mock_user_repo)
        with pytest.raises(ValidationError):
            await use_case.execute(DeleteUserRequest(email="nope"))


class TestListUsersUseCase:
    """Tests for ListUsersUseCase"""

    @pytest.mark.asyncio
    async def test_list_hides_password_by_default(self, mock_user_repo):
        mock_user_repo.find_all.return_value = [
            User(id="usr-1", full_name="A B", email="a@b.com"),
        ]

        result = await ListUsersUseCase(mock_user_repo).execute()

        mock_user_repo.find_all.assert_awaited_once_with(include_password=False)
        assert result.users[0].email == "a@b.com"
        assert result.users[0].password is None

    @pytest.mark.asyncio
    async def test_list_can_expose_hash(self, mock_user_repo, stored_hash):
        mock_user_repo.find_all.return_value = [make_user(stored_hash)]

        result = await ListUsersUseCase(mock_user_repo, include_password_hash=True).execute()

        mock_user_repo.find_all.assert_awaited_once_with(include_password=True)
        assert result.users[0].password == stored_hash.value

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_user_repo):
        mock_user_repo.find_all.return_value = []
        result = await ListUsersUseCase(mock_user_repo).execute()
        assert result.users == []


class TestUploadUserImageUseCase:
    """Tests for UploadUserImageUseCase"""

    @pytest.fixture
    def image_store(self):
        store = MagicMock(spec=ImageStore)
        store.save = AsyncMock(
            return_value=StoredImage(
                path="images/1-me.png",
                generated_name="1-me.png",
                public_path="/images/1-me.png",
                size=10,
            )
        )
        return store

    @pytest.fixture
    def upload(self):
        return UploadedImage(
            filename="me.png",
            content_type="image/png",
            read=AsyncMock(return_value=b""),
            size=10,
        )

    @pytest.mark.asyncio
    async def test_upload_success(self, mock_user_repo, image_store, upload, stored_hash):
        mock_user_repo.find_by_email.return_value = make_user(stored_hash)
        mock_user_repo.set_image_path_if_absent.return_value = True

        use_case = UploadUserImageUseCase(mock_user_repo, image_store)
        result = await use_case.execute("a@b.com", upload)

        assert result.file_path == "/images/1-me.png"
        mock_user_repo.set_image_path_if_absent.assert_awaited_once_with("a@b.com", "images/1-me.png")
        image_store.remove.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_unknown_user(self, mock_user_repo, image_store, upload):
        mock_user_repo.find_by_email.return_value = None

        use_case = UploadUserImageUseCase(mock_user_repo, image_store)
        with pytest.raises(UserNotFoundError):
            await use_case.execute("ghost@b.com", upload)
        image_store.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_when_image_already_set(self, mock_user_repo, image_store, upload, stored_hash):
        mock_user_repo.find_by_email.return_value = make_user(stored_hash, image_path="images/old.png")

        use_case = UploadUserImageUseCase(mock_user_repo, image_store)
        with pytest.raises(ImageAlreadyExistsError):
            await use_case.execute("a@b.com", upload)
        image_store.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_losing_race_removes_file(self, mock_user_repo, image_store, upload, stored_hash):
        mock_user_repo.find_by_email.return_value = make_user(stored_hash)
        mock_user_repo.set_image_path_if_absent.return_value = False

        use_case = UploadUserImageUseCase(mock_user_repo, image_store)
        with pytest.raises(ImageAlreadyExistsError):
            await use_case.execute("a@b.com", upload)
        image_store.remove.assert_called_once_with(image_store.save.return_value)

    @pytest.mark.asyncio
    async def test_store_failure_removes_file(self, mock_user_repo, image_store, upload, stored_hash):
        mock_user_repo.find_by_email.return_value = make_user(stored_hash)
        mock_user_repo.set_image_path_if_absent.side_effect = RuntimeError("db down")

        use_case = UploadUserImageUseCase(mock_user_repo, image_store)
        with pytest.raises(RuntimeError):
            await use_case.execute("a@b.com", upload)
        image_store.remove.assert_called_once()

    @pytest.mark.asyncio
    async def test_declared_format_checked_before_lookup(self, mock_user_repo, image_store, upload):
        image_store.check_declared.side_effect = InvalidImageFormatError("text/plain")

        use_case = UploadUserImageUseCase(mock_user_repo, image_store)
        with pytest.raises(InvalidImageFormatError):
            await use_case.execute("a@b.com", upload)
        mock_user_repo.find_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_file_rejected(self, mock_user_repo, image_store):
        use_case = UploadUserImageUseCase(mock_user_repo, image_store)
        with pytest.raises(ValidationError):
            await use_case.execute("a@b.com", None)
