"""
Duration strings in the "1h30m" / "720h" / "30s" form.

Units: ns, us (or µs), ms, s, m, h. Components may be fractional and are
summed; a single leading sign applies to the whole value. A bare number is
taken as seconds. The result is rounded to whole microseconds.
"""

import re
from datetime import timedelta

from filelocker.exceptions import ConfigurationError

_MICROSECONDS = {
    "ns": 0.001,
    "us": 1,
    "µs": 1,
    "ms": 1_000,
    "s": 1_000_000,
    "m": 60_000_000,
    "h": 3_600_000_000,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")
_BARE_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration string.

    Args:
        value: Duration such as "30s", "720h" or "1h15m30.5s".

    Returns:
        The parsed duration.

    Raises:
        ConfigurationError: If the string is not a valid duration.
    """
    text = value.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    if not text:
        msg = "Invalid duration"
        raise ConfigurationError(msg, duration=value)

    if _BARE_NUMBER.fullmatch(text):
        return sign * timedelta(seconds=float(text))

    total = 0.0
    pos = 0
    for match in _COMPONENT.finditer(text):
        if match.start() != pos:
            break
        total += float(match.group(1)) * _MICROSECONDS[match.group(2)]
        pos = match.end()

    if pos != len(text):
        msg = "Invalid duration"
        raise ConfigurationError(msg, duration=value)
    return sign * timedelta(microseconds=total)
