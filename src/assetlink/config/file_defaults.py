"""Fallback values for environment lookups, read from files in the working directory.

Two sources are consulted, in order, and the first one to define a name wins:

* ``.env``: ``NAME=value`` lines, optionally prefixed with ``export``;
  blank lines and ``#`` comments are skipped, surrounding quotes dropped.
* ``config/runtime_env.json``: a flat object of scalar values. ``null``
  entries are ignored and booleans become ``"true"``/``"false"``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, Tuple

from assetlink.config_loader import ConfigDirectory
from assetlink.exceptions import ConfigurationError

DOTENV_FILE = Path(".env")
RUNTIME_ENV_FILE = "runtime_env.json"

_EXPORT_PREFIX = "export "


def read_dotenv(path: Path) -> Dict[str, str]:
    if not path.is_file():
        return {}
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise ConfigurationError(f"Failed to load configuration from {path}", path=path) from exc
    return dict(_dotenv_pairs(lines))


def _dotenv_pairs(lines: list[str]) -> Iterator[Tuple[str, str]]:
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#") or "=" not in entry:
            continue
        key, value = entry.split("=", 1)
        if key.startswith(_EXPORT_PREFIX):
            key = key[len(_EXPORT_PREFIX) :]
        key = key.strip()
        if key:
            yield key, value.strip().strip("'").strip('"')


def read_json_defaults(config: ConfigDirectory) -> Dict[str, str]:
    defaults: Dict[str, str] = {}
    for key, value in config.read(RUNTIME_ENV_FILE, missing_ok=True).items():
        text = _as_text(key, value)
        if text is not None:
            defaults[key] = text
    return defaults


def _as_text(key: str, value: Any) -> str | None:
    if isinstance(value, (dict, list)):
        raise ConfigurationError(f"{RUNTIME_ENV_FILE} must map names to scalar values (problematic key: {key})")
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def load_file_defaults() -> Dict[str, str]:
    """Merge ``.env`` and ``config/runtime_env.json``; ``.env`` wins on conflicts."""
    merged = read_json_defaults(ConfigDirectory())
    merged.update(read_dotenv(DOTENV_FILE))
    return merged


__all__ = ["DOTENV_FILE", "RUNTIME_ENV_FILE", "load_file_defaults", "read_dotenv", "read_json_defaults"]
