# story_social/utils/logging_utils.py
"""
Request-scoped logging.

Each request gets its own LoggerAdapter, kept on `flask.g` and discarded with
the request. The adapter carries the request's log threshold, so a LOG_LEVEL
parameter affects only that request and never touches a shared logger level.
"""

import logging
import uuid
from typing import Optional

from flask import current_app, g, has_app_context

REQUEST_LOGGER_NAME = 'story_social.request'

_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}

def parse_log_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Maps a level name such as 'debug' or 'WARN' to a logging level. Unknown names give `default`."""
    if not name:
        return default
    return _LEVELS.get(str(name).strip().lower(), default)

class RequestLogger(logging.LoggerAdapter):
    """Prefixes records with the action name and request id and applies a per-request threshold."""

    def __init__(self, logger: logging.Logger, action: str, request_id: str, level: int):
        super().__init__(logger, {'action': action, 'request_id': request_id})
        self.threshold = level

    def isEnabledFor(self, level):
        return level >= self.threshold

    def process(self, msg, kwargs):
        return f"[{self.extra['action']} {self.extra['request_id']}] {msg}", kwargs

def configure_request_logging():
    """
    Lets request records reach the handlers; filtering happens per request in RequestLogger.
    Called once from create_app.
    """
    logging.getLogger(REQUEST_LOGGER_NAME).setLevel(logging.DEBUG)

def get_request_logger(action: str = 'main', level_name: Optional[str] = None) -> RequestLogger:
    """
    Returns the logger of the current request, creating it on first use.
    Without `level_name` the app's LOG_LEVEL setting is used.
    """
    existing = g.get('request_logger')
    if existing is not None:
        return existing

    default_name = current_app.config.get('LOG_LEVEL', 'info') if has_app_context() else 'info'
    level = parse_log_level(level_name, parse_log_level(default_name))
    request_logger = RequestLogger(
        logging.getLogger(REQUEST_LOGGER_NAME),
        action=action,
        request_id=uuid.uuid4().hex[:8],
        level=level
    )
    g.request_logger = request_logger
    return request_logger
