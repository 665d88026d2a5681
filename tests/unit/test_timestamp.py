"""Unit tests for message timestamp formatting."""

from datetime import datetime

import pytest

from candor.utils.timestamp import format_timestamp, now_exact

NOW = datetime(2025, 11, 13, 18, 45, 40)


@pytest.mark.unit
def test_absolute():
    assert format_timestamp("2025-11-13T18:45:40.572549") == "2025-11-13 18:45:40"


@pytest.mark.unit
@pytest.mark.parametrize(
    "stamp,expected",
    [
        ("2025-11-13T18:45:40", "0s ago"),
        ("2025-11-13T18:45:10", "30s ago"),
        ("2025-11-13T18:30:40", "15m ago"),
        ("2025-11-13T16:45:40", "2h ago"),
        ("2025-11-08T18:45:40", "5d ago"),
        ("2025-11-13T18:50:40", "5m from now"),
    ],
)
def test_relative(stamp, expected):
    assert format_timestamp(stamp, relative=True, now=NOW) == expected


@pytest.mark.unit
def test_unparseable_is_returned_unchanged():
    assert format_timestamp("yesterday-ish") == "yesterday-ish"


@pytest.mark.unit
def test_now_exact_round_trips():
    assert datetime.fromisoformat(now_exact())
