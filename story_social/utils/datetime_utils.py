# story_social/utils/datetime_utils.py
"""
Timestamp helpers.

Comment documents keep `postedDate` as the string the client sent; these
helpers provide the server-side default and check that a supplied value is
a readable timestamp.
"""

import logging
from datetime import datetime, timezone
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

class DateTimeUtils:
    """Timestamp helpers; everything is normalized to UTC."""

    @staticmethod
    def now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def parse_iso_datetime(iso_string: str) -> datetime:
        """
        Parses an ISO-8601 string into a UTC datetime.

        Supported:
        - 2024-01-15T10:30:00Z
        - 2024-01-15T10:30:00+09:00
        - 2024-01-15T10:30:00.123456Z
        - 2024-01-15T10:30:00 (assumed UTC)
        """
        try:
            if not iso_string:
                raise ValueError("empty string")

            if iso_string.endswith('Z'):
                iso_string = iso_string[:-1] + '+00:00'

            dt = dateutil_parser.isoparse(iso_string)
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)
            return dt.astimezone(timezone.utc)

        except (ValueError, OverflowError) as e:
            logger.debug(f"ISO datetime parse failed: {iso_string} - {e}")
            raise ValueError(f"Invalid ISO datetime: {iso_string}")

    @staticmethod
    def parse_timestamp(value: str) -> datetime:
        """
        Accepts ISO-8601 first, then any format dateutil understands
        (e.g. JavaScript's Date.toString() output).
        """
        try:
            return DateTimeUtils.parse_iso_datetime(value)
        except ValueError:
            pass
        try:
            dt = dateutil_parser.parse(value)
        except (ValueError, OverflowError, TypeError):
            raise ValueError(f"Unreadable timestamp: {value}")
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """Formats a datetime as UTC ISO-8601 with a 'Z' suffix."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        else:
            dt = dt.astimezone(timezone.utc)
        return dt.isoformat().replace('+00:00', 'Z')

def now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return DateTimeUtils.to_iso_string(DateTimeUtils.now())

def is_timestamp(value: str) -> bool:
    try:
        DateTimeUtils.parse_timestamp(value)
        return True
    except ValueError:
        return False
