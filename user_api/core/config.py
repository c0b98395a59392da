# Standard library imports
import os
from typing import Final, List, Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv(
            "MONGODB_URI",
            os.getenv("MONGO_URI", "mongodb://localhost:27017")
        )
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "user_api")

        # Password hashing (fixed bcrypt work factor)
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Profile image uploads
        self.image_upload_dir: Final[str] = os.getenv("IMAGE_UPLOAD_DIR", "images")
        self.image_url_prefix: Final[str] = os.getenv("IMAGE_URL_PREFIX", "/images")
        self.image_upload_max_mb: Final[int] = int(os.getenv("IMAGE_UPLOAD_MAX_MB", "5"))

        # GET /user/getAll historically returned password hashes; off unless asked for
        self.list_include_password_hash: Final[bool] = _env_flag("LIST_INCLUDE_PASSWORD_HASH")

        # HTTP
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
