from __future__ import annotations

"""Settings dataclasses for the asset shell and its remote connections."""


from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from assetlink.config_loader import ConfigDirectory
from assetlink.exceptions import ConfigurationError
from assetlink.validation_guards import is_absolute_uri, is_positive_int, is_valid_id_short

from .runtime import env_int, env_seconds, env_str

APPLICATION_CONFIG_FILE = "application.json"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_CACHE_TTL_SECONDS = 0.0


@dataclass(frozen=True)
class AasSettings:
    aas_name: str
    aas_uri: str
    asset_name: str
    asset_uri: str
    listening_port: int
    hostname: str

    def __post_init__(self) -> None:
        for field_name in ("aas_name", "asset_name"):
            value = getattr(self, field_name)
            if not is_valid_id_short(value):
                raise ConfigurationError.invalid_value(
                    field_name, value, "Must start with a letter and contain only letters, digits and underscores"
                )
        for field_name in ("aas_uri", "asset_uri"):
            value = getattr(self, field_name)
            if not is_absolute_uri(value):
                raise ConfigurationError.invalid_value(field_name, value, "Must be an absolute URI")
        if not is_positive_int(self.listening_port):
            raise ConfigurationError.invalid_value("listening_port", self.listening_port, "Must be a positive integer")
        if not self.hostname:
            raise ConfigurationError.missing_value("hostname")


@dataclass(frozen=True)
class ConnectionSettings:
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    default_cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS

    def __post_init__(self) -> None:
        if self.request_timeout_seconds <= 0:
            raise ConfigurationError.invalid_value(
                "request_timeout_seconds", self.request_timeout_seconds, "Must be positive"
            )
        if self.default_cache_ttl_seconds < 0:
            raise ConfigurationError.invalid_value(
                "default_cache_ttl_seconds", self.default_cache_ttl_seconds, "Must be non-negative"
            )


def load_aas_settings(config_dir: Optional[Path] = None) -> AasSettings:
    """Build ``AasSettings`` from ``application.json`` with environment overrides.

    Every field may come from the ``aas`` section of the JSON file or from its
    environment variable; the environment wins. Missing file is fine as long as
    the environment provides every value.
    """
    file_values = _load_aas_section(config_dir)

    def _pick(env_name: str, key: str) -> Any:
        value = env_str(env_name, or_value=_optional_str(file_values.get(key)))
        if value is None:
            raise ConfigurationError.missing_value(key, f"set {env_name} or '{key}' in {APPLICATION_CONFIG_FILE}")
        return value

    port_default = file_values.get("listening_port")
    if port_default is not None and not is_positive_int(port_default):
        raise ConfigurationError.invalid_value("listening_port", port_default, "Must be a positive integer")
    listening_port = env_int("AAS_LISTENING_PORT", or_value=port_default)
    if listening_port is None:
        raise ConfigurationError.missing_value("listening_port", f"set AAS_LISTENING_PORT or 'listening_port' in {APPLICATION_CONFIG_FILE}")

    return AasSettings(
        aas_name=_pick("AAS_NAME", "name"),
        aas_uri=_pick("AAS_URI", "uri"),
        asset_name=_pick("ASSET_NAME", "asset_name"),
        asset_uri=_pick("ASSET_URI", "asset_uri"),
        listening_port=listening_port,
        hostname=_pick("AAS_HOSTNAME", "hostname"),
    )


@lru_cache(maxsize=1)
def get_aas_settings() -> AasSettings:
    return load_aas_settings()


@lru_cache(maxsize=1)
def get_connection_settings() -> ConnectionSettings:
    timeout = env_seconds("ASSETLINK_REQUEST_TIMEOUT_SECONDS", or_value=DEFAULT_REQUEST_TIMEOUT_SECONDS)
    ttl = env_seconds("ASSETLINK_CACHE_TTL_SECONDS", or_value=DEFAULT_CACHE_TTL_SECONDS)
    return ConnectionSettings(request_timeout_seconds=float(timeout), default_cache_ttl_seconds=float(ttl))


def _load_aas_section(config_dir: Optional[Path]) -> dict[str, Any]:
    return ConfigDirectory(config_dir).section(APPLICATION_CONFIG_FILE, "aas", missing_file_ok=True)


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


__all__ = [
    "AasSettings",
    "ConnectionSettings",
    "get_aas_settings",
    "get_connection_settings",
    "load_aas_settings",
]
