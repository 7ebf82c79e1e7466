"""
Log level enumeration

Fixed, process-wide severity registry. Lower rank means more severe.
"""

import re
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ranks are ordered from most severe (SEVERE) to least severe (FINEST).
    """

    SEVERE = 1
    WARNING = 2
    INFO = 3
    FINE = 4
    FINER = 5
    FINEST = 6

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.upper()
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.SEVERE: "\033[31m",   # Red
            LogLevel.WARNING: "\033[33m",  # Yellow
            LogLevel.INFO: "\033[34m",     # Blue
            LogLevel.FINE: "\033[36m",     # Cyan
            LogLevel.FINER: "\033[90m",    # Gray
            LogLevel.FINEST: "\033[90m",   # Gray
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Name -> rank, read-only
LEVELS: Mapping[str, int] = MappingProxyType(
    {level.name: int(level) for level in LogLevel}
)

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def level_name(rank: int, colored: bool = False) -> str:
    """
    Reverse lookup of a rank to its display name.

    Ranks outside the registry render as their decimal value.
    """
    try:
        level = LogLevel(rank)
    except ValueError:
        return str(rank)

    if colored:
        return f"{level.color_code}{level.name}{level.reset_code}"
    return level.name


def colorize(text: str, color_code: str) -> str:
    """Wrap non-empty text in an ANSI color."""
    if not text:
        return text
    return f"{color_code}{text}\033[0m"


def strip_colors(text: str) -> str:
    """Remove ANSI color sequences from text."""
    return _ANSI_PATTERN.sub("", text)
