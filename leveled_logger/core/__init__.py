"""
Core module for the leveled logger

This module contains the fundamental classes:
- Logger: Leveled logger with deferred writes
- LoggerOptions: Per-instance options
- LogRecord: Captured log call
- LogLevel: Severity registry
- Dispatcher: FIFO worker for deferred writes
"""

from leveled_logger.core.log_level import LEVELS, LogLevel, strip_colors
from leveled_logger.core.errors import InvalidArgumentError
from leveled_logger.core.log_record import LogRecord
from leveled_logger.core.dispatcher import Dispatcher, get_default_dispatcher
from leveled_logger.core.logger_options import LoggerOptions
from leveled_logger.core.logger import Logger

__all__ = [
    "LEVELS",
    "LogLevel",
    "strip_colors",
    "InvalidArgumentError",
    "LogRecord",
    "Dispatcher",
    "get_default_dispatcher",
    "LoggerOptions",
    "Logger",
]
