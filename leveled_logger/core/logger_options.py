"""
Logger options

Per-instance settings passed as the third Logger argument.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Set

from leveled_logger.formatters.text_formatter import TIMESTAMP_FORMAT

if TYPE_CHECKING:
    from leveled_logger.core.dispatcher import Dispatcher


@dataclass
class LoggerOptions:
    """
    Logger options.

    ``streams`` maps each destination to the set of ranks it accepts. When
    given, the logger keeps a reference to it rather than a copy.
    """

    streams: Optional[Mapping[Any, Set[int]]] = None
    colored: bool = True
    timestamp_format: str = TIMESTAMP_FORMAT
    dispatcher: Optional["Dispatcher"] = None

    def __post_init__(self):
        """Validate options after initialization."""
        if self.streams is not None and not isinstance(self.streams, Mapping):
            raise TypeError("streams must be a mapping of stream to level set")
        if not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty")

    @classmethod
    def default(cls) -> "LoggerOptions":
        """Create default options."""
        return cls()

    @classmethod
    def plain(cls, **kwargs) -> "LoggerOptions":
        """Create options with colors disabled."""
        return cls(colored=False, **kwargs)

    @classmethod
    def coerce(cls, options) -> "LoggerOptions":
        """Accept None, a LoggerOptions or a mapping of option fields."""
        if options is None:
            return cls.default()
        if isinstance(options, cls):
            return options
        return cls(**dict(options))
