"""
Logging configuration for the inventory service.

Module loggers are created at import time, before the config is loaded, so
they start at INFO. ``configure_logging`` applies the validated level from
``Config`` to every logger handed out here.
"""
import logging
import sys
from typing import Dict

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_level: int = logging.INFO
_loggers: Dict[str, logging.Logger] = {}


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a service logger writing to stdout.

    Args:
        name: Logger name (defaults to this module's name if not provided)

    Returns:
        Logger registered for later level changes
    """
    name = name or __name__
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    _apply_level(logger, _level)
    _loggers[name] = logger
    return logger


def configure_logging(level: str) -> None:
    """
    Set the level of all current and future service loggers.

    Args:
        level: Level name such as ``"DEBUG"``; already validated by Config
    """
    global _level
    _level = getattr(logging, level.upper())
    for logger in _loggers.values():
        _apply_level(logger, _level)


def _apply_level(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
