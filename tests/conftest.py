"""
Shared pytest fixtures for user API tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGODB_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_api",
        "BCRYPT_ROUNDS": "4",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings(tmp_path):
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.bcrypt_rounds = 4
    mock.image_upload_dir = str(tmp_path / "images")
    mock.image_url_prefix = "/images"
    mock.image_upload_max_mb = 5
    mock.list_include_password_hash = False
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("user_api.core.config.get_settings", return_value=mock), patch(
        "user_api.core.security.get_settings", return_value=mock
    ), patch("user_api.main.get_settings", return_value=mock):
        yield mock
