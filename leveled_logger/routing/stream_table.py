"""
Stream routing table

A routing table maps a writable destination (any object with a
``write(text)`` method) to the set of level ranks it accepts. Membership is
what counts: a stream may accept any subset of levels.
"""

from __future__ import annotations
import sys
from typing import Any, Callable, Mapping, MutableMapping, Optional, Set

from leveled_logger.core.log_level import LogLevel

StreamTable = MutableMapping[Any, Set[int]]


def all_levels() -> Set[int]:
    """Return the set of every registered rank."""
    return {int(level) for level in LogLevel}


def default_stream_table() -> StreamTable:
    """Build the default table: standard output accepting every level."""
    return {sys.stdout: all_levels()}


def accepting_streams(streams: Mapping[Any, Set[int]], level: int) -> list:
    """
    Determine which streams accept a level.

    The table is snapshotted so that it can be mutated concurrently.

    Args:
        streams: Routing table
        level: Message rank

    Returns:
        Streams in table order
    """
    return [stream for stream, levels in list(streams.items()) if level in levels]


def route_line(
    streams: Mapping[Any, Set[int]],
    level: int,
    line: str,
    on_error: Optional[Callable[[Any, Exception], None]] = None,
) -> int:
    """
    Write one formatted line to every stream accepting the level.

    A failing stream does not stop the remaining ones.

    Args:
        streams: Routing table, read as it is now
        level: Message rank
        line: Formatted line without terminator
        on_error: Called with (stream, exception) for each failed write

    Returns:
        Number of successful writes
    """
    written = 0
    for stream in accepting_streams(streams, level):
        try:
            stream.write(line + "\n")
        except Exception as e:
            if on_error is not None:
                on_error(stream, e)
        else:
            written += 1
    return written
