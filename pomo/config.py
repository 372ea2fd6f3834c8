"""Application configuration and logging setup."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pomo.models import AppConfig

log = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".config" / "pomo"
_CONFIG_FILE = _CONFIG_DIR / "config.json"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def config_path() -> Path:
    """Where the config file lives."""
    return _CONFIG_FILE


def load_config() -> AppConfig:
    """Load config from disk, returning defaults if none exists."""
    if _CONFIG_FILE.exists():
        try:
            data = json.loads(_CONFIG_FILE.read_text())
            return AppConfig(**data)
        except (OSError, TypeError, json.JSONDecodeError, ValidationError) as err:
            log.warning("Ignoring unreadable config %s: %s", _CONFIG_FILE, err)
    return AppConfig()


def save_config(config: AppConfig) -> Path:
    """Write config to disk. Returns the config file path."""
    _CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    _CONFIG_FILE.write_text(config.model_dump_json(indent=2))
    return _CONFIG_FILE


def set_log_file(path: str) -> AppConfig:
    """Set the log file path and save config."""
    resolved = Path(path).expanduser().resolve()
    config = load_config()
    config.log_file = str(resolved)
    save_config(config)
    return config


def reset_config() -> AppConfig:
    """Reset to the default configuration."""
    config = AppConfig()
    save_config(config)
    return config


def setup_logging(log_file: Optional[str], level: str = "WARNING") -> None:
    """Send ``pomo`` logs to ``log_file``, or nowhere when it is None.

    The countdown owns the terminal, so logs never go to stdout or stderr.
    """
    logger = logging.getLogger("pomo")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return

    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
