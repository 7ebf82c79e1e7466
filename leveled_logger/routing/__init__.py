"""
Stream routing module

Maps output streams to the level ranks they accept.
"""

from leveled_logger.routing.stream_table import (
    StreamTable,
    accepting_streams,
    all_levels,
    default_stream_table,
    route_line,
)

__all__ = [
    "StreamTable",
    "accepting_streams",
    "all_levels",
    "default_stream_table",
    "route_line",
]
