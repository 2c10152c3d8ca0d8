"""
Logging setup shared by every gedcom_importer module.

    log = get_logger(__name__)

* every logger lives under the ``gedcom_importer`` namespace
* the base logger writes the master log (``logs/gedcom_importer.log``) and
  echoes warnings to the console
* each module logger also writes ``logs/<module>.log``
* level, file name, directory and rotation come from ``config/gedcom_importer.yml``;
  ``debug: true`` forces DEBUG everywhere
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from gedcom_importer.config import base_dir, get_config

BASE_LOGGER_NAME = "gedcom_importer"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass
class _LogSettings:
    level: int = logging.INFO
    console_level: int = logging.WARNING
    log_dir: Path = Path("logs")
    master_file: str = "gedcom_importer.log"
    rotate: bool = False
    loggers: Dict[str, Logger] = field(default_factory=dict)


_settings: Optional[_LogSettings] = None


def _read_settings() -> _LogSettings:
    cfg = get_config()
    log_cfg = cfg.logging

    debug = bool(cfg.debug)
    level_name = str(log_cfg.get("level", "INFO")).upper()
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.INFO)

    log_dir = Path(log_cfg.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = base_dir() / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    return _LogSettings(
        level=level,
        console_level=logging.DEBUG if debug else logging.WARNING,
        log_dir=log_dir,
        master_file=log_cfg.get("file", "gedcom_importer.log"),
        rotate=bool(log_cfg.get("rotate", False)),
    )


def _file_handler(settings: _LogSettings, filename: str) -> logging.Handler:
    path = settings.log_dir / filename
    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(settings.level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _setup() -> _LogSettings:
    global _settings
    if _settings is not None:
        return _settings

    settings = _read_settings()
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False
    base.addHandler(_file_handler(settings, settings.master_file))

    console = StreamHandler()
    console.setLevel(settings.console_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    console.is_console_handler = True  # type: ignore[attr-defined]
    base.addHandler(console)

    settings.loggers[BASE_LOGGER_NAME] = base
    _settings = settings
    return settings


def _qualified_name(name: Optional[str]) -> str:
    if not name or name == BASE_LOGGER_NAME:
        return BASE_LOGGER_NAME
    if name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def get_logger(name: Optional[str] = None) -> Logger:
    """Return the project logger for ``name`` (usually ``__name__``)."""
    settings = _setup()
    qualified = _qualified_name(name)

    cached = settings.loggers.get(qualified)
    if cached is not None:
        return cached

    logger = logging.getLogger(qualified)
    logger.setLevel(settings.level)
    logger.propagate = True

    module_part = qualified[len(BASE_LOGGER_NAME) + 1:]
    logger.addHandler(_file_handler(settings, f"{module_part.replace('.', '_')}.log"))

    settings.loggers[qualified] = logger
    return logger


def set_console_level(level: int) -> None:
    """Change what reaches the console, e.g. ``logging.INFO`` for ``--verbose``."""
    base = _setup().loggers[BASE_LOGGER_NAME]
    for handler in base.handlers:
        if getattr(handler, "is_console_handler", False):
            handler.setLevel(level)


def list_active_loggers() -> List[str]:
    """Names of the loggers handed out so far."""
    return list(_setup().loggers)
