"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Leveled Logger - named loggers with severity thresholds, deferred writes
and per-stream level routing
"""

__version__ = "1.0.0"

from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_options import LoggerOptions
from leveled_logger.core.log_level import LEVELS, LogLevel, strip_colors
from leveled_logger.core.log_record import LogRecord
from leveled_logger.core.errors import InvalidArgumentError
from leveled_logger.core.dispatcher import Dispatcher

from leveled_logger import formatters
from leveled_logger import routing

__all__ = [
    "Logger",
    "LoggerOptions",
    "LEVELS",
    "LogLevel",
    "strip_colors",
    "LogRecord",
    "InvalidArgumentError",
    "Dispatcher",
    "formatters",
    "routing",
]
