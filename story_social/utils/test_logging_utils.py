# story_social/utils/test_logging_utils.py
import logging

from story_social.utils.logging_utils import get_request_logger, parse_log_level, REQUEST_LOGGER_NAME

def test_parse_log_level():
    assert parse_log_level('debug') == logging.DEBUG
    assert parse_log_level('WARN') == logging.WARNING
    assert parse_log_level(' error ') == logging.ERROR
    assert parse_log_level('verbose') == logging.INFO
    assert parse_log_level(None, logging.ERROR) == logging.ERROR

def test_request_logger_is_cached_per_request(app):
    with app.test_request_context('/'):
        first = get_request_logger('getComments', 'debug')
        assert get_request_logger('other') is first
    with app.test_request_context('/'):
        assert get_request_logger('getComments') is not first

def test_request_level_applies_only_to_its_request(app, caplog):
    caplog.set_level(logging.DEBUG, logger=REQUEST_LOGGER_NAME)

    with app.test_request_context('/'):
        log = get_request_logger('postReaction', 'error')
        log.info("hidden")
        log.error("shown")
    with app.test_request_context('/'):
        log = get_request_logger('postReaction', 'debug')
        log.debug("also shown")

    assert "hidden" not in caplog.text
    assert "shown" in caplog.text
    assert "also shown" in caplog.text
    assert "[postReaction " in caplog.text

def test_default_level_comes_from_config(app):
    app.config['LOG_LEVEL'] = 'warning'
    with app.test_request_context('/'):
        log = get_request_logger('getReactions')
        assert not log.isEnabledFor(logging.INFO)
        assert log.isEnabledFor(logging.WARNING)
