"""
Declarative request rules for the user endpoints.

Each endpoint has an ordered tuple of FieldRule entries (field, predicate,
message). collect_violations evaluates all of them and returns every
failure; ensure_valid turns a non-empty result into a ValidationError so
the use case stops before touching storage.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from email_validator import EmailNotValidError, validate_email

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

FULL_NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
# Character classes are ASCII only; accented letters count as none of them
UPPER_PATTERN = re.compile(r"[A-Z]")
LOWER_PATTERN = re.compile(r"[a-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
SYMBOL_PATTERN = re.compile(r"[ !-/:-@\[-`{-~]")

PASSWORD_MIN_LENGTH = 8
# bcrypt only consumes the first 72 bytes of its input
PASSWORD_MAX_BYTES = 72


@dataclass(frozen=True)
class FieldRule:
    field: str
    check: Callable[[str], bool]
    message: str


@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


# -----------------------------------------------------------------------------
# Predicates
# -----------------------------------------------------------------------------


def is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def normalize_email(value: str) -> str:
    """Canonical, lower-cased form used for storage and lookups."""
    result = validate_email(value.strip(), check_deliverability=False)
    return result.normalized.lower()


def is_full_name(value: str) -> bool:
    return bool(FULL_NAME_PATTERN.match(value))


def is_strong_password(value: str) -> bool:
    return (
        len(value) >= PASSWORD_MIN_LENGTH
        and len(value.encode("utf-8")) <= PASSWORD_MAX_BYTES
        and UPPER_PATTERN.search(value) is not None
        and LOWER_PATTERN.search(value) is not None
        and DIGIT_PATTERN.search(value) is not None
        and SYMBOL_PATTERN.search(value) is not None
    )


# -----------------------------------------------------------------------------
# Rule sets
# -----------------------------------------------------------------------------

EMAIL_RULE = FieldRule("email", is_email, "must be a valid email address")
FULL_NAME_RULE = FieldRule("fullName", is_full_name, "may contain letters and spaces only")
PASSWORD_RULE = FieldRule(
    "password",
    is_strong_password,
    "needs 8+ characters with upper, lower, digit and symbol",
)

CREATE_USER_RULES = (EMAIL_RULE, FULL_NAME_RULE, PASSWORD_RULE)
EDIT_USER_RULES = (EMAIL_RULE, FULL_NAME_RULE, PASSWORD_RULE)
DELETE_USER_RULES = (EMAIL_RULE,)
UPLOAD_IMAGE_RULES = (EMAIL_RULE,)


def collect_violations(
    values: Mapping[str, Any],
    rules: Sequence[FieldRule],
) -> List[Violation]:
    """Evaluate every rule in order; missing or non-string values fail their rule."""
    violations: List[Violation] = []
    for rule in rules:
        value: Optional[Any] = values.get(rule.field)
        if not isinstance(value, str) or not value or not rule.check(value):
            violations.append(Violation(rule.field, rule.message))
    return violations


def ensure_valid(values: Mapping[str, Any], rules: Sequence[FieldRule]) -> None:
    violations = collect_violations(values, rules)
    if violations:
        logger.info("Request rejected by validation: %s", ", ".join(str(v) for v in violations))
        raise ValidationError("Validation failed", violations=violations)
