"""
Logging Utilities
=================

Centralized logging configuration and the ``log(message, level)``
collaborator used by configuration sources.
"""

import json
import logging
import logging.handlers
import os
import sys
from enum import Enum
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


class LogLevel(Enum):
    """Log levels accepted by ``Loggable.log``."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@runtime_checkable
class Loggable(Protocol):
    """Anything that can receive a message with a level."""

    def log(self, message: Any, level: LogLevel) -> None:
        ...


def setup_logging(
    config: Optional[Any] = None,
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_file_size: str = "10MB",
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up centralized logging configuration.

    Args:
        config: Loaded configuration (anything exposing ``get_section``);
            its ``logging`` section overrides the keyword arguments
        log_level: Logging level
        log_file: Log file path
        max_file_size: Maximum log file size
        backup_count: Number of backup files to keep

    Returns:
        Configured logger
    """
    if config is not None:
        logging_config = config.get_section('logging')
        log_level = logging_config.get('level', log_level)
        log_file = logging_config.get('file', log_file)
        max_file_size = logging_config.get('max_file_size', max_file_size)
        backup_count = logging_config.get('backup_count', backup_count)

    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        size_bytes = _parse_size(str(max_file_size))

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=size_bytes,
            backupCount=int(backup_count),
            encoding='utf-8'
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    app_logger = logging.getLogger('confsource')
    app_logger.info(f"Logging initialized - Level: {log_level}, File: {log_file}")

    return app_logger


def _parse_size(size_str: str) -> int:
    """
    Parse size string to bytes.

    Args:
        size_str: Size string (e.g., '10MB', '1GB')

    Returns:
        Size in bytes
    """
    size_str = size_str.upper().strip()

    if size_str.endswith('KB'):
        return int(float(size_str[:-2]) * 1024)
    elif size_str.endswith('MB'):
        return int(float(size_str[:-2]) * 1024 * 1024)
    elif size_str.endswith('GB'):
        return int(float(size_str[:-2]) * 1024 * 1024 * 1024)
    else:
        return int(size_str)


class ConfigLogger:
    """
    ``Loggable`` backed by a standard library logger.
    """

    def __init__(self, name: str = "confsource"):
        """
        Initialize configuration logger.

        Args:
            name: Logger name
        """
        self.logger = logging.getLogger(name)
        self.name = name

    def log(self, message: Any, level: LogLevel) -> None:
        """
        Log a message of any type at the given level.

        Args:
            message: String, exception, mapping, sequence or any other object
            level: Log level
        """
        getattr(self.logger, LogLevel(level).value)(self.format_message(message))

    def log_debug(self, message: Any) -> None:
        self.log(message, LogLevel.DEBUG)

    def log_info(self, message: Any) -> None:
        self.log(message, LogLevel.INFO)

    def log_warning(self, message: Any) -> None:
        self.log(message, LogLevel.WARNING)

    def log_error(self, message: Any) -> None:
        self.log(message, LogLevel.ERROR)

    def log_critical(self, message: Any) -> None:
        self.log(message, LogLevel.CRITICAL)

    def format_message(self, message: Any) -> str:
        """
        Render a message as a single line.

        Strings pass through, exceptions become ``Class: message``,
        mappings and lists become compact JSON, everything else uses repr.
        """
        if isinstance(message, str):
            return message
        if isinstance(message, BaseException):
            return f"{type(message).__name__}: {message}"
        if isinstance(message, (Mapping, list, tuple)):
            try:
                return json.dumps(
                    dict(message) if isinstance(message, Mapping) else list(message),
                    ensure_ascii=False,
                    separators=(',', ':'),
                    default=repr
                )
            except (TypeError, ValueError) as e:
                return f"[JSON encoding error: {e}]"
        return repr(message)


class NullLogger:
    """``Loggable`` that discards every message."""

    def log(self, message: Any, level: LogLevel) -> None:
        pass

