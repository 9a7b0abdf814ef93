"""Logging Management for the Iterable API client

Opt-in handler configuration for the ``iterable_api`` logger hierarchy.
Importing the library never attaches handlers.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "iterable_api"


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        """Format log record with colors for console output."""
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


def _parse_level(level: str) -> int:
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')
    return numeric_level


class LoggingManager:
    """Centralized logging configuration for the client library."""

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    def __new__(cls) -> 'LoggingManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logging manager (only once)."""
        if self._initialized:
            return

        self.logger = logging.getLogger(LOGGER_NAME)
        self.console_handler: Optional[logging.Handler] = None
        self.file_handler: Optional[logging.Handler] = None
        self._initialized = True

    def configure(self, level: str = "INFO",
                  log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
        """Attach console (and optionally file) handlers to the library logger.

        Calling this again replaces the handlers it previously installed.

        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional path for a rotating log file

        Returns:
            The configured ``iterable_api`` logger
        """
        numeric_level = _parse_level(level)
        self._remove_handlers()

        self.logger.setLevel(numeric_level)

        self.console_handler = logging.StreamHandler(sys.stdout)
        self.console_handler.setLevel(numeric_level)
        self.console_handler.setFormatter(ColoredFormatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%H:%M:%S'
        ))
        self.logger.addHandler(self.console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5
            )
            self.file_handler.setLevel(logging.DEBUG)
            self.file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(self.file_handler)

        return self.logger

    def set_log_level(self, level: str):
        """Set the logging level for the library logger and console handler.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        numeric_level = _parse_level(level)
        self.logger.setLevel(numeric_level)
        if self.console_handler is not None:
            self.console_handler.setLevel(numeric_level)

    def reset(self):
        """Remove every handler this manager installed."""
        self._remove_handlers()
        self.logger.setLevel(logging.NOTSET)

    def _remove_handlers(self):
        for handler in (self.console_handler, self.file_handler):
            if handler is not None:
                self.logger.removeHandler(handler)
                handler.close()
        self.console_handler = None
        self.file_handler = None


def configure_logging(level: str = "INFO",
                      log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Shortcut for ``LoggingManager().configure(...)``."""
    return LoggingManager().configure(level=level, log_file=log_file)
