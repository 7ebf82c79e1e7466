"""
Line formatter for the bracketed text layout

Each physical line has the form

    [<YYYY-MM-DD HH:mm:ss>][<name>][<LEVEL>] <marker> <content>

where the marker is "***" on the first line of a message and blank on
continuation lines.
"""

from typing import List, Optional

from leveled_logger.core.log_level import colorize, level_name
from leveled_logger.core.log_record import LogRecord
from leveled_logger.formatters.message_format import format_message

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
FIRST_LINE_MARKER = "***"
CONTINUATION_MARKER = " " * len(FIRST_LINE_MARKER)

TIMESTAMP_COLOR = "\033[34m"  # Blue
NAME_COLOR = "\033[35m"       # Magenta


class TextFormatter:
    """
    Format log records into prefixed, multi-line aware text lines.

    Timestamps are rendered in local time.
    """

    def __init__(self, colored: bool = True, timestamp_format: str = TIMESTAMP_FORMAT):
        """
        Initialize text formatter.

        Args:
            colored: Wrap timestamp, name and level in ANSI colors
            timestamp_format: strftime format for timestamps
        """
        self.colored = colored
        self.timestamp_format = timestamp_format

    def format_prefix(self, record: LogRecord, name: Optional[str] = None) -> str:
        """
        Render the bracketed prefix for a record.

        Args:
            record: Log record to format
            name: Logger name (None renders as an empty field)

        Returns:
            Prefix string without trailing space
        """
        timestamp = record.timestamp.strftime(self.timestamp_format)
        name = "" if name is None else str(name)

        if self.colored:
            timestamp = colorize(timestamp, TIMESTAMP_COLOR)
            name = colorize(name, NAME_COLOR)

        return f"[{timestamp}][{name}][{level_name(record.level, self.colored)}]"

    def format(self, record: LogRecord, name: Optional[str] = None) -> List[str]:
        """
        Format a record into its output lines.

        Carriage returns are dropped and the message is split on newlines.

        Args:
            record: Log record to format
            name: Logger name

        Returns:
            Lines in top-to-bottom order, without line terminators
        """
        prefix = self.format_prefix(record, name)
        message = format_message(*record.messages).replace("\r", "")

        lines = []
        marker = FIRST_LINE_MARKER
        for line in message.split("\n"):
            lines.append(" ".join([prefix, marker, line]))
            marker = CONTINUATION_MARKER
        return lines

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(colored={self.colored}, timestamp_format='{self.timestamp_format}')"
