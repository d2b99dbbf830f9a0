# users_service/services/validation.py
"""
Validation rules protecting the user aggregate.
Email and postal-code checks are pure; email uniqueness needs one repository lookup.
"""
import re

from email_validator import EmailNotValidError, validate_email

POSTAL_CODE_RE = re.compile(r"^\d{2}-\d{3}$")


def is_valid_email(email: str | None) -> bool:
    """
    Check that ``email`` is a single well-formed address.

    Surrounding whitespace is ignored, but the parsed address must match the
    trimmed input exactly: inputs the parser would have to repair (display
    names, comments, stray characters) are rejected, as is a trailing dot.
    """
    if not email:
        return False
    trimmed = email.strip()
    if not trimmed or trimmed.endswith("."):
        return False
    try:
        parsed = validate_email(trimmed, check_deliverability=False)
    except EmailNotValidError:
        return False
    # The parser lowercases the domain; the domain is case-insensitive anyway
    local, _, domain = trimmed.rpartition("@")
    return parsed.local_part == local and parsed.domain == domain.lower()


async def is_email_in_use(user_repository, email: str, exclude_user_id: int | None = None) -> bool:
    """
    True if another user already owns ``email``.

    Args:
        user_repository: UserRepository (or compatible) used for the lookup
        email: Address to look up
        exclude_user_id: Id of the user being updated, whose own email does not count
    """
    return await user_repository.email_taken(email, exclude_user_id=exclude_user_id)


def is_valid_postal_code(postal_code: str | None) -> bool:
    """Postal codes have the shape ``DD-DDD`` (two digits, hyphen, three digits)."""
    if not postal_code or not postal_code.strip():
        return False
    return POSTAL_CODE_RE.fullmatch(postal_code) is not None
