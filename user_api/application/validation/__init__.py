from .user_rules import (
    CREATE_USER_RULES,
    DELETE_USER_RULES,
    EDIT_USER_RULES,
    UPLOAD_IMAGE_RULES,
    FieldRule,
    Violation,
    collect_violations,
    ensure_valid,
    normalize_email,
)

__all__ = [
    "CREATE_USER_RULES",
    "DELETE_USER_RULES",
    "EDIT_USER_RULES",
    "UPLOAD_IMAGE_RULES",
    "FieldRule",
    "Violation",
    "collect_violations",
    "ensure_valid",
    "normalize_email",
]
