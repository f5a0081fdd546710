"""Logging setup for the aicontext tools and host applications.

Only the ``aicontext`` logger hierarchy is raised to the requested level. The
root logger stays at WARNING or above so Qt and other libraries keep quiet.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..services.settings import Settings

__all__ = ["LOG_DIR_ENV", "LOG_LEVEL_ENV", "PACKAGE_LOGGER", "get_log_path", "resolve_level", "setup_logging"]

PACKAGE_LOGGER = "aicontext"
LOG_LEVEL_ENV = "AICONTEXT_LOG_LEVEL"
LOG_DIR_ENV = "AICONTEXT_LOG_DIR"
_DEFAULT_LOG_DIR = Path.home() / ".aicontext" / "logs"
_LOG_FILENAME = "aicontext.log"
_HANDLER_MARK = "_aicontext_owned"
_LOG_PATH: Path | None = None


def resolve_level(level: int | str | None = None, settings: Settings | None = None) -> int:
    """Pick a level from ``level``, then ``AICONTEXT_LOG_LEVEL``, then ``settings.debug_logging``."""

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or None
    if level is None:
        return logging.DEBUG if settings is not None and settings.debug_logging else logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    settings: Settings | None = None,
    *,
    level: int | str | None = None,
    log_dir: Path | str | None = None,
    console: bool = True,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    force: bool = False,
) -> Path:
    """Attach a rotating ``aicontext.log`` handler (plus stderr) and return the log path.

    Repeated calls are no-ops unless ``force`` is set, in which case the
    handlers installed by the previous call are replaced.
    """

    global _LOG_PATH
    if _LOG_PATH is not None and not force:
        return _LOG_PATH

    resolved_level = resolve_level(level, settings)
    target_dir = Path(log_dir or os.environ.get(LOG_DIR_ENV) or _DEFAULT_LOG_DIR).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / _LOG_FILENAME

    root = logging.getLogger()
    _remove_owned_handlers(root)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handlers: list[logging.Handler] = [
        logging.handlers.RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    ]
    if console:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setLevel(resolved_level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        root.addHandler(handler)

    root.setLevel(max(resolved_level, logging.WARNING))
    logging.getLogger(PACKAGE_LOGGER).setLevel(resolved_level)
    logging.captureWarnings(True)

    _LOG_PATH = log_path
    logging.getLogger(__name__).debug(
        "Logging configured at %s, writing to %s", logging.getLevelName(resolved_level), log_path
    )
    return log_path


def get_log_path() -> Path | None:
    """Return the currently configured log file if available."""

    return _LOG_PATH


def _remove_owned_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()
