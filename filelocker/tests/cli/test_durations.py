from datetime import timedelta

import pytest

from filelocker.cli.durations import parse_duration
from filelocker.exceptions import ConfigurationError


@pytest.mark.parametrize(
    "value,expected",
    [
        ("30s", timedelta(seconds=30)),
        ("720h", timedelta(hours=720)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("1.5h", timedelta(minutes=90)),
        ("250ms", timedelta(milliseconds=250)),
        ("1000ns", timedelta(microseconds=1)),
        ("1ms500us", timedelta(microseconds=1500)),
        ("2000000ns", timedelta(milliseconds=2)),
        ("2m0.5s", timedelta(minutes=2, milliseconds=500)),
        ("-5m", timedelta(minutes=-5)),
        ("45", timedelta(seconds=45)),
        ("0", timedelta()),
    ],
)
def test_parse_duration(value: str, expected: timedelta) -> None:
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "-", "h", "30x", "1h 30m", "30s5", "ten minutes"])
def test_parse_duration_rejects_invalid(value: str) -> None:
    with pytest.raises(ConfigurationError):
        parse_duration(value)
