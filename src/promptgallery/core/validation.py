"""Validation and sanitization of prompt fields."""

import html
import logging

from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import FieldError, ValidationError

logger = logging.getLogger(__name__)

MIN_CATEGORY_LENGTH = 1
MIN_PROMPT_TEXT_LENGTH = 10

_http_url = TypeAdapter(AnyHttpUrl)


def is_valid_url(value: str) -> bool:
    """Check that ``value`` is an absolute http(s) URL with a host."""
    if not value or value != value.strip():
        return False
    try:
        _http_url.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def is_encodable(value: str) -> bool:
    """Check that ``value`` can be stored as UTF-8 (no lone surrogates)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def sanitize_text(value: str) -> str:
    """Escape HTML special characters so stored text renders inertly."""
    return html.escape(value, quote=True)


def validate_prompt_fields(
    category: str, image_url: str, prompt_text: str
) -> tuple[str, str, str]:
    """Validate and sanitize the editable fields of a prompt.

    ``category`` and ``prompt_text`` are trimmed before their length is
    checked and HTML-escaped afterwards.  ``image_url`` is stored as given.

    Args:
        category: Free-form category tag (non-empty after trimming)
        image_url: Absolute http(s) URL of the image
        prompt_text: Descriptive text (at least 10 characters after trimming)

    Returns:
        Tuple of ``(category, image_url, prompt_text)`` ready for storage

    Raises:
        ValidationError: Listing every field that failed
    """
    errors: list[FieldError] = []

    category = (category or "").strip()
    if not is_encodable(category):
        errors.append(FieldError("category", "Category contains invalid characters"))
    elif len(category) < MIN_CATEGORY_LENGTH:
        errors.append(FieldError("category", "Category is required"))

    image_url = image_url or ""
    if not is_encodable(image_url) or not is_valid_url(image_url):
        errors.append(FieldError("image_url", "Must be a valid URL"))

    prompt_text = (prompt_text or "").strip()
    if not is_encodable(prompt_text):
        errors.append(FieldError("prompt_text", "Prompt text contains invalid characters"))
    elif len(prompt_text) < MIN_PROMPT_TEXT_LENGTH:
        errors.append(
            FieldError(
                "prompt_text",
                f"Prompt text must be at least {MIN_PROMPT_TEXT_LENGTH} characters",
            )
        )

    if errors:
        logger.debug(f"Prompt validation failed: {[e.field for e in errors]}")
        raise ValidationError(errors)

    return sanitize_text(category), image_url, sanitize_text(prompt_text)


def validate_login_fields(username: str, password: str) -> str:
    """Check that both login fields are present.

    Returns:
        The trimmed username

    Raises:
        ValidationError: If either field is empty
    """
    errors: list[FieldError] = []

    username = (username or "").strip()
    if not username:
        errors.append(FieldError("username", "Username is required"))
    elif not is_encodable(username):
        errors.append(FieldError("username", "Username contains invalid characters"))
    if not password:
        errors.append(FieldError("password", "Password is required"))
    elif not is_encodable(password):
        errors.append(FieldError("password", "Password contains invalid characters"))

    if errors:
        raise ValidationError(errors)

    return username
