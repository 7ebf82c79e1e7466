"""
Log formatters module

Message formatting and the bracketed line layout.
"""

from leveled_logger.formatters.message_format import format_message
from leveled_logger.formatters.text_formatter import TextFormatter

__all__ = [
    "format_message",
    "TextFormatter",
]
