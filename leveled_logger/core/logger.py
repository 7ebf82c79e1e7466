"""
Main Logger class - leveled logger with deferred writes

The accept/reject decision is taken synchronously in log(); formatting and
writing happen later on the dispatcher's worker thread.
"""

from __future__ import annotations
from datetime import datetime
from functools import partial
from typing import Any, Mapping, Optional, Set
import sys
import threading

from leveled_logger.core.dispatcher import Dispatcher, get_default_dispatcher
from leveled_logger.core.errors import coerce_level
from leveled_logger.core.log_level import LEVELS, LogLevel
from leveled_logger.core.log_record import LogRecord
from leveled_logger.core.logger_options import LoggerOptions
from leveled_logger.formatters.text_formatter import TextFormatter
from leveled_logger.routing.stream_table import default_stream_table, route_line


class Logger:
    """
    Named logger with a severity threshold and a stream routing table.

    Example:
        logger = Logger("svc", Logger.levels["INFO"])
        logger.warning("disk at %d%%", 87)
    """

    levels: Mapping[str, int] = LEVELS

    def __init__(
        self,
        name: Optional[str] = None,
        level: Any = None,
        options: Any = None,
    ):
        """
        Initialize logger.

        Args:
            name: Display name (None renders as an empty field)
            level: Threshold rank (default: WARNING)
            options: LoggerOptions or a mapping of its fields

        Raises:
            InvalidArgumentError: If level is not an integer
        """
        options = LoggerOptions.coerce(options)

        self.name = name
        self.__level = int(LogLevel.WARNING)
        self.__streams = default_stream_table()
        self._formatter = TextFormatter(
            colored=options.colored,
            timestamp_format=options.timestamp_format
        )
        self._dispatcher: Dispatcher = options.dispatcher or get_default_dispatcher()
        self._metrics = {"logged": 0, "processed": 0, "write_errors": 0}
        self._metrics_lock = threading.Lock()

        if level is not None:
            self.level = level

        if options.streams is not None:
            self.__streams = options.streams

    @property
    def level(self) -> int:
        """Current threshold rank."""
        return self.__level

    @level.setter
    def level(self, value: Any) -> None:
        self.__level = coerce_level(value)

    @property
    def streams(self) -> Mapping[Any, Set[int]]:
        """Live routing table."""
        return self.__streams

    def log(self, level: Any, *messages: Any) -> None:
        """
        Log a message.

        Does nothing when level is less severe than the threshold. Otherwise
        the call is captured and one write task is queued.

        Args:
            level: Message rank
            *messages: Format string and arguments, or parts to join
        """
        now = datetime.now()
        level = coerce_level(level)
        threshold = self.__level

        if level > threshold:
            return

        record = LogRecord(
            level=level,
            threshold=threshold,
            messages=messages,
            timestamp=now
        )
        self._count("logged")
        self._dispatcher.submit(partial(self._write, record))

    def _write(self, record: LogRecord) -> None:
        """Format a record and fan it out to the routing table (worker thread)."""
        for line in self._formatter.format(record, self.name):
            route_line(self.__streams, record.level, line, on_error=self._on_write_error)
        self._count("processed")

    def _on_write_error(self, stream: Any, error: Exception) -> None:
        self._count("write_errors")
        print(f"Writer error: {error}", file=sys.stderr)

    def _count(self, key: str) -> None:
        with self._metrics_lock:
            self._metrics[key] += 1

    def severe(self, *messages: Any) -> None:
        """Log severe message."""
        self.log(LogLevel.SEVERE, *messages)

    def warning(self, *messages: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, *messages)

    def info(self, *messages: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, *messages)

    def fine(self, *messages: Any) -> None:
        """Log fine message."""
        self.log(LogLevel.FINE, *messages)

    def finer(self, *messages: Any) -> None:
        """Log finer message."""
        self.log(LogLevel.FINER, *messages)

    def finest(self, *messages: Any) -> None:
        """Log finest message."""
        self.log(LogLevel.FINEST, *messages)

    def flush(self) -> None:
        """Wait until every message queued so far has been written."""
        self._dispatcher.flush()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._metrics_lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self.name!r}, level={self.__level})"
