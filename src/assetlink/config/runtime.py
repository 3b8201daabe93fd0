from __future__ import annotations

"""Typed environment lookups with file-backed fallbacks.

A name is looked up in the process environment first. When it is unset (or
blank), the fallback files described in ``file_defaults`` are consulted.
File contents are read once and cached until ``reset_default_values``.
"""


import os
from typing import Callable, Optional, TypeVar

from assetlink.exceptions import ConfigurationError

from .file_defaults import load_file_defaults

T = TypeVar("T")

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_file_defaults: dict[str, str] | None = None


def reset_default_values() -> None:
    """Forget cached file defaults so the next lookup re-reads them."""
    global _file_defaults
    _file_defaults = None


def _file_default(name: str) -> Optional[str]:
    global _file_defaults
    if _file_defaults is None:
        _file_defaults = load_file_defaults()
    return _file_defaults.get(name)


def _missing(name: str) -> ConfigurationError:
    return ConfigurationError(f"Required environment variable {name!r} is not set", name=name)


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch a string, falling back to file defaults and then ``or_value``."""

    def usable(candidate: str | None) -> str | None:
        if candidate is None:
            return None
        if strip:
            candidate = candidate.strip()
        if candidate == "" and not allow_blank:
            return None
        return candidate

    value = usable(os.getenv(name))
    if value is None:
        value = usable(_file_default(name))
    if value is not None:
        return value
    if required:
        raise _missing(name)
    return or_value


def _env_parsed(name: str, parse: Callable[[str], T], kind: str, or_value: T | None, required: bool) -> T | None:
    raw = env_str(name)
    if raw is None:
        if required and or_value is None:
            raise _missing(name)
        return or_value
    try:
        return parse(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be {kind} (got {raw!r})", name=name) from exc


def _parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(raw)


def env_int(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    return _env_parsed(name, int, "an integer", or_value, required)


def env_float(name: str, or_value: float | None = None, *, required: bool = False) -> float | None:
    return _env_parsed(name, float, "a float", or_value, required)


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    return _env_parsed(name, _parse_bool, "a boolean", or_value, required)


def env_seconds(name: str, or_value: float | None = None, *, required: bool = False) -> float | None:
    """Fetch a non-negative duration in (fractional) seconds."""
    value = env_float(name, or_value, required=required)
    if value is not None and value < 0:
        raise ConfigurationError(f"Environment variable {name!r} must be non-negative (got {value})", name=name)
    return value


__all__ = [
    "env_bool",
    "env_float",
    "env_int",
    "env_seconds",
    "env_str",
    "reset_default_values",
]
