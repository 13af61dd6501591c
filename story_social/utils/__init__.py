# story_social/utils/__init__.py
"""
Helpers shared across the API packages.
"""

from .datetime_utils import DateTimeUtils, now_iso, is_timestamp
from .logging_utils import get_request_logger, parse_log_level

__all__ = [
    'DateTimeUtils', 'now_iso', 'is_timestamp',
    'get_request_logger', 'parse_log_level'
]
