"""
Validation guard helpers used by element constructors and settings loaders.

Each helper focuses on a single check so higher-level validations can compose these
building blocks without introducing additional branching.
"""

from __future__ import annotations

import re
from typing import Any, Type
from urllib.parse import urlsplit

_ID_SHORT_PATTERN = re.compile(r"[a-zA-Z]\w*", re.ASCII)


def require(condition: bool, error: Exception) -> None:
    """Raise the provided exception when the condition fails."""
    if not condition:
        raise error


def require_instance(value: Any, expected_type: Type[Any], field_name: str) -> None:
    """Ensure a value is an instance of the expected type."""
    require(
        isinstance(value, expected_type),
        TypeError(f"{field_name} must be a {expected_type.__name__} object"),
    )


def require_non_empty_string(value: Any, field_name: str) -> None:
    """Ensure a string field is present and non-empty."""
    require(isinstance(value, str), TypeError(f"{field_name} must be a string"))
    require(value.strip() != "", ValueError(f"{field_name} cannot be empty"))


def require_non_negative(value: int | float, field_name: str) -> None:
    """Ensure numeric values are non-negative."""
    require(value >= 0, ValueError(f"{field_name} cannot be negative: {value}"))


def is_valid_id_short(value: Any) -> bool:
    """Letters, digits and underscores only, starting with a letter."""
    return isinstance(value, str) and _ID_SHORT_PATTERN.fullmatch(value) is not None


def require_id_short(value: Any, field_name: str = "id_short") -> None:
    """Ensure an identifier follows the idShort formatting rules."""
    require_non_empty_string(value, field_name)
    require(
        is_valid_id_short(value),
        ValueError(f"{field_name} must start with a letter and contain only letters, digits and underscores: {value!r}"),
    )


def is_absolute_uri(value: Any) -> bool:
    """Return True for URIs with a scheme, e.g. ``http://x/y`` or ``urn:uuid:...``."""
    if not isinstance(value, str) or not value:
        return False
    parsed = urlsplit(value)
    if not parsed.scheme:
        return False
    return bool(parsed.netloc or parsed.path)


def is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


__all__ = [
    "is_absolute_uri",
    "is_positive_int",
    "is_valid_id_short",
    "require",
    "require_id_short",
    "require_instance",
    "require_non_empty_string",
    "require_non_negative",
]
