"""
Log record data structure

Captured synchronously by Logger.log() and consumed once by the dispatcher.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Tuple


@dataclass(frozen=True)
class LogRecord:
    """
    Log record data structure.

    Holds everything known about a message at the moment it was logged:
    capture time, the logger threshold at that instant, the message rank and
    the message parts.
    """

    level: int
    threshold: int
    messages: Tuple[Any, ...] = ()
    timestamp: datetime = field(default_factory=datetime.now)
