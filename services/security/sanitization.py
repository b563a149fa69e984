"""
Input sanitization and validation helpers.

Non-string input is treated as empty: sanitizers return ``""`` and
validators return False.
"""

from __future__ import annotations

import json
import re
from typing import Any

from django.core.exceptions import ValidationError
from django.core.validators import URLValidator
from django.core.validators import validate_email as django_validate_email

DEFAULT_MAX_INPUT_LENGTH = 1000
MAX_EMAIL_LENGTH = 255
MIN_EMAIL_LENGTH = 3
MAX_URL_LENGTH = 2048
MAX_JSON_LENGTH = 10000

_SCRIPT_TAG = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE)
_IFRAME_TAG = re.compile(r"<iframe[^>]*>.*?</iframe>", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"""on\w+\s*=\s*["'][^"']*["']""", re.IGNORECASE)
_JAVASCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
_ALPHANUMERIC = re.compile(r"^[a-zA-Z0-9\s\-_]+$")
_SQL_META = re.compile(r"""[;'"\\]""")
_PATH_UNSAFE = re.compile(r"[^a-zA-Z0-9\-_/]")

_URL_VALIDATOR = URLValidator(schemes=["http", "https"])


def sanitize_html(value: object) -> str:
    """Strip script/iframe tags, inline event handlers and ``javascript:`` URLs."""
    if not isinstance(value, str):
        return ""
    value = _SCRIPT_TAG.sub("", value)
    value = _IFRAME_TAG.sub("", value)
    value = _EVENT_HANDLER.sub("", value)
    value = _JAVASCRIPT_SCHEME.sub("", value)
    return value.strip()


def sanitize_user_input(value: object, max_length: int = DEFAULT_MAX_INPUT_LENGTH) -> str:
    """
    Clean free-text input from a form or API body.

    Args:
        value: Raw input.
        max_length: Length to truncate to after cleaning.

    Returns:
        Trimmed text without script tags or inline handlers.
    """
    if not isinstance(value, str):
        return ""
    value = value.strip()
    value = _SCRIPT_TAG.sub("", value)
    value = _EVENT_HANDLER.sub("", value)
    return value[:max_length]


def validate_email(value: object) -> bool:
    """Check an email address with Django's validator, within length limits."""
    if not isinstance(value, str):
        return False
    if not MIN_EMAIL_LENGTH <= len(value) <= MAX_EMAIL_LENGTH:
        return False
    try:
        django_validate_email(value)
    except ValidationError:
        return False
    return True


def validate_url(value: object) -> bool:
    """Accept only absolute http(s) URLs."""
    if not isinstance(value, str) or len(value) > MAX_URL_LENGTH:
        return False
    try:
        _URL_VALIDATOR(value)
    except ValidationError:
        return False
    return True


def validate_alphanumeric(value: object) -> bool:
    """Letters, digits, whitespace, hyphens and underscores only."""
    if not isinstance(value, str):
        return False
    return _ALPHANUMERIC.match(value) is not None


def sanitize_sql(value: object) -> str:
    """Remove quote, semicolon and backslash characters."""
    if not isinstance(value, str):
        return ""
    return _SQL_META.sub("", value)[:DEFAULT_MAX_INPUT_LENGTH]


def sanitize_path(value: object) -> str:
    """Remove ``..`` segments and anything outside ``[A-Za-z0-9-_/]``."""
    if not isinstance(value, str):
        return ""
    return _PATH_UNSAFE.sub("", value.replace("..", ""))


def sanitize_json(value: Any) -> Any:
    """
    Round-trip a value through JSON.

    Returns:
        A plain JSON copy of ``value``, or None if it is not
        serializable or serializes to more than 10000 characters.
    """
    try:
        encoded = json.dumps(value)
    except (TypeError, ValueError):
        return None
    if len(encoded) > MAX_JSON_LENGTH:
        return None
    return json.loads(encoded)
