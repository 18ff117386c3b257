from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_PACKAGE_LOGGER = "modifiers"
_INSTALLED_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None


def _level_from_name(name: str) -> int:
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Logger:
    """Attach one handler to the ``modifiers`` logger.

    Writes to ``log_path`` when given, otherwise to stderr. Idempotent per
    process: calling again with the same target only updates the level; a
    different target replaces the previously installed handler.
    """
    global _INSTALLED_HANDLER, _CONFIGURED_TARGET

    pkg_logger = logging.getLogger(_PACKAGE_LOGGER)
    numeric = _level_from_name(level)
    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"

    if _INSTALLED_HANDLER is not None and _CONFIGURED_TARGET == target:
        pkg_logger.setLevel(numeric)
        _INSTALLED_HANDLER.setLevel(numeric)
        return pkg_logger

    if _INSTALLED_HANDLER is not None:
        pkg_logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()

    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(numeric)

    _INSTALLED_HANDLER = handler
    _CONFIGURED_TARGET = target
    return pkg_logger


def configure_from_config(config: "ModifiersConfig") -> logging.Logger:  # noqa: F821
    """Configure logging from the ``logging`` section of a config."""
    return configure_logging(level=config.log_level, log_path=config.log_path)


def reset_logging_for_tests() -> None:
    """Test-only: remove the installed handler."""
    global _INSTALLED_HANDLER, _CONFIGURED_TARGET
    pkg_logger = logging.getLogger(_PACKAGE_LOGGER)
    if _INSTALLED_HANDLER is not None:
        pkg_logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
    pkg_logger.setLevel(logging.NOTSET)
    _INSTALLED_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = ["LOG_FORMAT", "configure_logging", "configure_from_config", "reset_logging_for_tests"]
