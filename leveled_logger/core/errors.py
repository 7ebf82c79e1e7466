"""Exceptions raised by the logger"""


class InvalidArgumentError(ValueError):
    """Raised when a log level cannot be coerced to an integer rank."""


def coerce_level(value) -> int:
    """
    Coerce a level value to an integer rank.

    Accepts ints (including LogLevel members), integral floats and numeric
    strings. None and the empty string are rejected rather than read as 0.

    Raises:
        InvalidArgumentError: If value is not a finite integer
    """
    if isinstance(value, int):
        return int(value)

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Invalid log level provided: {value!r}") from None

    if not number.is_integer():
        raise InvalidArgumentError(f"Invalid log level provided: {value!r}")

    return int(number)
