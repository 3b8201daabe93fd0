"""Shared configuration helpers and dataclasses."""

from assetlink.exceptions import ConfigurationError

from .runtime import env_bool, env_float, env_int, env_seconds, env_str, reset_default_values
from .settings import (
    AasSettings,
    ConnectionSettings,
    get_aas_settings,
    get_connection_settings,
    load_aas_settings,
)

__all__ = [
    "AasSettings",
    "ConfigurationError",
    "ConnectionSettings",
    "env_bool",
    "env_float",
    "env_int",
    "env_seconds",
    "env_str",
    "get_aas_settings",
    "get_connection_settings",
    "load_aas_settings",
    "reset_default_values",
]
