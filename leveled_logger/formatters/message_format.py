"""
printf-style message formatting

Supported directives in a leading format string:
    %s  str() of the argument
    %d  integer (NaN when the argument is not numeric)
    %i  same as %d
    %f  float (NaN when the argument is not numeric)
    %j  JSON ([Circular] when the argument cannot be serialised)
    %%  a literal percent sign

A directive with no argument left is kept verbatim. Arguments left over after
substitution are appended, separated by spaces.
"""

import json
import re
from typing import Any

_DIRECTIVE = re.compile(r"%[sdifj%]")


def _to_int(value: Any) -> str:
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, str):
        try:
            return str(int(value))
        except ValueError:
            pass
    try:
        return str(int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return "NaN"


def _to_float(value: Any) -> str:
    try:
        return str(float(value))
    except (TypeError, ValueError, OverflowError):
        return "NaN"


def _to_json(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return "[Circular]"


_CONVERTERS = {
    "s": str,
    "d": _to_int,
    "i": _to_int,
    "f": _to_float,
    "j": _to_json,
}


def format_message(*messages: Any) -> str:
    """
    Build a message from its parts.

    If the first part is a string it is treated as a format string and the
    following parts are substituted into it positionally. Otherwise all parts
    are joined with spaces.

    Example:
        format_message("disk at %d%%", 87)  # "disk at 87%"
        format_message("a", 1, None)        # "a 1 None"
    """
    if not messages:
        return ""

    first, args = messages[0], list(messages[1:])
    if not isinstance(first, str):
        return " ".join(str(m) for m in messages)

    position = 0

    def substitute(match):
        nonlocal position
        directive = match.group(0)[1]
        if directive == "%":
            return "%"
        if position >= len(args):
            return match.group(0)

        value = args[position]
        position += 1
        return _CONVERTERS[directive](value)

    text = _DIRECTIVE.sub(substitute, first)
    rest = args[position:]
    if rest:
        text = " ".join([text] + [str(r) for r in rest])
    return text
