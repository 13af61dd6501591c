# story_social/utils/test_datetime_utils.py
"""
Timestamp helper tests

Usage: python -m pytest story_social/utils/test_datetime_utils.py -v
"""

import pytest
from datetime import datetime, timezone
from story_social.utils.datetime_utils import DateTimeUtils, now_iso, is_timestamp

def test_parse_iso_datetime():
    test_cases = [
        "2024-01-15T10:30:00Z",
        "2024-01-15T10:30:00+09:00",
        "2024-01-15T10:30:00.123456Z",
        "2024-01-15T10:30:00"
    ]

    for iso_string in test_cases:
        dt = DateTimeUtils.parse_iso_datetime(iso_string)
        assert isinstance(dt, datetime)
        assert dt.tzinfo == timezone.utc

def test_parse_timestamp_accepts_javascript_dates():
    dt = DateTimeUtils.parse_timestamp("Mon Jan 15 2024 10:30:00")
    assert dt == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

def test_to_iso_string():
    assert DateTimeUtils.to_iso_string(datetime(2024, 1, 15, 10, 30)) == "2024-01-15T10:30:00Z"
    assert now_iso().endswith("Z")

def test_is_timestamp():
    assert is_timestamp("2024-01-15T10:30:00Z")
    assert not is_timestamp("not a date")
    assert not is_timestamp("")

def test_error_handling():
    with pytest.raises(ValueError):
        DateTimeUtils.parse_iso_datetime("invalid-date")
    with pytest.raises(ValueError):
        DateTimeUtils.parse_iso_datetime("")
