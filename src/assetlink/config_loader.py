"""
JSON configuration files below a ``config/`` directory.

``application.json`` holds the asset shell description under its ``aas``
section; other files may be added next to it and read the same way.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from assetlink.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "config"


def default_config_dir() -> Path:
    return Path.cwd() / CONFIG_DIR_NAME


class ConfigDirectory:
    """
    Reads JSON objects from files in one directory.

    Example:
        config = ConfigDirectory()
        aas = config.section("application.json", "aas")
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path if path is not None else default_config_dir()

    def read(self, filename: str, *, missing_ok: bool = False) -> Dict[str, Any]:
        """
        Parse ``filename`` and return its top-level object.

        A missing file raises ``FileNotFoundError`` unless ``missing_ok`` is set,
        in which case an empty dict is returned. Unreadable files, invalid JSON
        and non-object documents raise ``ConfigurationError``.
        """
        file_path = self.path / filename
        if not file_path.is_file():
            if missing_ok:
                return {}
            raise FileNotFoundError(f"Config file not found: {file_path}")

        logger.debug("Reading configuration file %s", file_path)
        try:
            payload = json.loads(file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in config file {filename}", path=file_path) from exc
        except OSError as exc:
            raise ConfigurationError(f"Failed to read config file {file_path}", path=file_path) from exc

        if not isinstance(payload, dict):
            raise ConfigurationError(f"{filename} must contain a JSON object at the top level", path=file_path)
        return payload

    def section(self, filename: str, name: str, *, missing_file_ok: bool = False) -> Dict[str, Any]:
        """Return the object stored under ``name`` in ``filename``."""
        if missing_file_ok and not (self.path / filename).is_file():
            return {}
        payload = self.read(filename)
        if name not in payload:
            raise ConfigurationError(f"Configuration section not found: {name}")
        section = payload[name]
        if not isinstance(section, dict):
            raise ConfigurationError(f"Configuration section '{name}' must be an object, got {type(section).__name__}")
        return section

    def parameter(self, filename: str, section_name: str, name: str) -> Any:
        section = self.section(filename, section_name)
        if name not in section:
            raise ConfigurationError(f"Parameter '{name}' not found in section '{section_name}'")
        return section[name]


def load_config(filename: str) -> Dict[str, Any]:
    """Read ``filename`` from ``config/`` below the working directory."""
    return ConfigDirectory().read(filename)


__all__ = ["CONFIG_DIR_NAME", "ConfigDirectory", "default_config_dir", "load_config"]
