"""
Root logger setup for processes that host asset shells.

``setup_logging`` installs a stdout handler and, for named services, a
``logs/<service>.log`` file handler. Environment knobs:

- ``LOG_LEVEL``: root level name (default ``INFO``).
- ``LOG_DIR``: directory for service log files (default ``./logs``).
- ``LOG_APPEND``: keep the previous log file instead of truncating it.
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import List, Optional

from assetlink.config import env_bool, env_str

_setup_lock = threading.Lock()
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
QUIET_LOGGERS = ("asyncio", "aiohttp")


def _discard_root_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        root.removeHandler(handler)
        try:
            handler.close()
        except OSError as exc:
            logger.debug("Closing log handler %r failed: %s", handler, exc)


def _console_handler(user_friendly: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if user_friendly:
        # Interactive use: bare messages, problems only.
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.setLevel(logging.WARNING)
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler.setLevel(logging.DEBUG)
    return handler


def _service_file_handler(service_name: str, log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    mode = "a" if env_bool("LOG_APPEND", or_value=False) else "w"
    handler = logging.handlers.WatchedFileHandler(log_dir / f"{service_name}.log", mode=mode)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler.setLevel(logging.INFO)
    return handler


def _root_level() -> int:
    name = env_str("LOG_LEVEL", or_value="INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _log_dir(log_dir: Optional[Path]) -> Path:
    if log_dir is not None:
        return log_dir
    configured = env_str("LOG_DIR")
    return Path(configured) if configured else Path.cwd() / "logs"


def setup_logging(service_name: Optional[str] = None, user_friendly: bool = False, log_dir: Optional[Path] = None):
    """Configure the root logger, replacing handlers installed by earlier calls."""

    with _setup_lock:
        root = logging.getLogger()
        _discard_root_handlers(root)

        handlers: List[logging.Handler] = [_console_handler(user_friendly)]
        if service_name:
            handlers.append(_service_file_handler(service_name, _log_dir(log_dir)))
        for handler in handlers:
            root.addHandler(handler)

        root.setLevel(_root_level())
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["setup_logging"]
