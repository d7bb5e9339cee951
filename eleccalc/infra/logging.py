"""
Infrastructure layer - logging

Every module logs through ``get_logger(__name__)``, so all records pass through
the ``eleccalc`` package logger, which owns the console and file handlers.

Streamlit executes app.py again on every widget interaction. ``configure`` is
therefore called many times per process and each setter leaves exactly one
handler of each kind behind.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "eleccalc"
CONSOLE_HANDLER_NAME = "eleccalc-console"
FILE_HANDLER_NAME = "eleccalc-file"

CONSOLE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s] %(message)s'
FILE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}


def _named_handlers(logger: logging.Logger, name: str):
    return [h for h in logger.handlers if h.get_name() == name]


class LoggerManager:
    """Owns the handlers on the package logger."""

    @classmethod
    def package_logger(cls) -> logging.Logger:
        """The ``eleccalc`` logger, with its console handler installed once."""
        logger = logging.getLogger(PACKAGE_LOGGER)
        if not _named_handlers(logger, CONSOLE_HANDLER_NAME):
            handler = logging.StreamHandler(sys.stdout)
            handler.set_name(CONSOLE_HANDLER_NAME)
            handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(handler)
            if logger.level == logging.NOTSET:
                logger.setLevel(logging.INFO)
        return logger

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        cls.package_logger()
        return logging.getLogger(name)

    @classmethod
    def set_log_file(cls, log_file: Union[str, Path]) -> bool:
        """
        Write records to ``log_file`` as well as the console.

        A second call with the same path is a no-op; a different path replaces
        the previous file handler.

        Returns:
            True when a new handler was installed
        """
        logger = cls.package_logger()
        target = os.path.abspath(log_file)
        current = _named_handlers(logger, FILE_HANDLER_NAME)
        if any(h.baseFilename == target for h in current):
            return False

        try:
            Path(target).parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(target, encoding='utf-8')
        except OSError as e:
            logger.warning(f"could not open log file {target}: {e}")
            return False

        for old in current:
            logger.removeHandler(old)
            old.close()
        handler.set_name(FILE_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        return True

    @classmethod
    def set_level(cls, level: str) -> bool:
        """Set the package log level; unknown names are logged and ignored."""
        logger = cls.package_logger()
        value = _LEVELS.get(str(level).upper())
        if value is None:
            logger.warning(f"unknown log level {level!r}, keeping {logging.getLevelName(logger.level)}")
            return False
        if logger.level == value:
            return False
        logger.setLevel(value)
        return True

    @classmethod
    def configure(cls, level: str = "INFO", log_file: Optional[Union[str, Path]] = None) -> None:
        """Apply the settings from config; safe to call on every rerun."""
        cls.set_level(level)
        if log_file:
            cls.set_log_file(log_file)

    @classmethod
    def reset(cls) -> None:
        """Remove and close the package handlers (tests)."""
        logger = logging.getLogger(PACKAGE_LOGGER)
        for name in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME):
            for handler in _named_handlers(logger, name):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)


def get_logger(name: str) -> logging.Logger:
    return LoggerManager.get_logger(name)


def set_log_level(level: str) -> bool:
    return LoggerManager.set_level(level)


def configure_logging(level: str = "INFO", log_file: Optional[Union[str, Path]] = None) -> None:
    LoggerManager.configure(level, log_file)
