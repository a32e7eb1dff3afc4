"""Human time-duration syntax used by --gc and the metadata file.

Durations are written as a sequence of <integer><unit> pieces, optionally
separated by whitespace: "2weeks", "1h 30m", "3days12h", "1s".
"""

import re
from datetime import timedelta

from cdtest.core.errors import DurationParseError

_MICROSECOND = 1
_MILLISECOND = 1_000
_SECOND = 1_000_000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 2_630_016 * _SECOND  # 30.44 days
_YEAR = 31_557_600 * _SECOND  # 365.25 days

# Values are microseconds per unit; nanosecond units are handled separately.
_UNITS: dict[str, int] = {
    "usec": _MICROSECOND,
    "us": _MICROSECOND,
    "msec": _MILLISECOND,
    "ms": _MILLISECOND,
    "seconds": _SECOND,
    "second": _SECOND,
    "sec": _SECOND,
    "s": _SECOND,
    "minutes": _MINUTE,
    "minute": _MINUTE,
    "min": _MINUTE,
    "m": _MINUTE,
    "hours": _HOUR,
    "hour": _HOUR,
    "hr": _HOUR,
    "h": _HOUR,
    "days": _DAY,
    "day": _DAY,
    "d": _DAY,
    "weeks": _WEEK,
    "week": _WEEK,
    "w": _WEEK,
    "months": _MONTH,
    "month": _MONTH,
    "M": _MONTH,
    "years": _YEAR,
    "year": _YEAR,
    "y": _YEAR,
}
_NANOSECOND_UNITS = frozenset({"nsec", "ns"})

_PIECE = re.compile(r"\s*(\d+)\s*([A-Za-z]+)\s*")


def parse_duration(text: str) -> timedelta:
    """Parse a human duration expression into a timedelta.

    Nanosecond pieces are accumulated and truncated to microseconds, the
    resolution of timedelta.

    Args:
        text: Expression such as "2weeks" or "1h 30m"

    Returns:
        The total duration

    Raises:
        DurationParseError: If the text is empty or contains anything other
            than <integer><unit> pieces with known units
    """
    if not text.strip():
        raise DurationParseError(text)

    micros = 0
    nanos = 0
    pos = 0
    while pos < len(text):
        match = _PIECE.match(text, pos)
        if match is None:
            raise DurationParseError(text)
        try:
            value = int(match.group(1))
        except ValueError as e:
            # int() refuses digit strings beyond the interpreter's limit
            raise DurationParseError(text) from e
        unit = match.group(2)
        if unit in _NANOSECOND_UNITS:
            nanos += value
        elif unit in _UNITS:
            micros += value * _UNITS[unit]
        else:
            raise DurationParseError(text)
        pos = match.end()

    try:
        return timedelta(microseconds=micros + nanos // 1_000)
    except OverflowError as e:
        raise DurationParseError(text) from e


def format_duration(delta: timedelta) -> str:
    """Render a non-negative timedelta in the syntax parse_duration accepts.

    Examples:
        >>> format_duration(timedelta(weeks=2))
        '2weeks'
        >>> format_duration(timedelta(days=1, hours=2))
        '1day 2h'
        >>> format_duration(timedelta(0))
        '0s'
    """
    remaining = (delta.days * 86_400 + delta.seconds) * _SECOND + delta.microseconds
    if remaining < 0:
        raise ValueError(f"Cannot format negative duration: {delta}")
    if remaining == 0:
        return "0s"

    parts: list[str] = []
    weeks, remaining = divmod(remaining, _WEEK)
    if weeks:
        parts.append(f"{weeks}week" if weeks == 1 else f"{weeks}weeks")
    days, remaining = divmod(remaining, _DAY)
    if days:
        parts.append(f"{days}day" if days == 1 else f"{days}days")
    for suffix, size in (("h", _HOUR), ("m", _MINUTE), ("s", _SECOND), ("ms", _MILLISECOND)):
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{suffix}")
    if remaining:
        parts.append(f"{remaining}us")
    return " ".join(parts)
