"""
Unit tests for log sanitizing helpers.
"""
import logging

from mood_garden.core.logging_config import _resolve_log_level, _sanitize_data
from mood_garden.middleware.request_logging import _sanitize_response_body


def test_masks_sensitive_keys():
    data = {"database_url": "postgresql://u:p@h/db", "nested": {"api_key": "abc"}, "mood": "happy"}

    assert _sanitize_data(data) == {
        "database_url": "***MASKED***",
        "nested": {"api_key": "***MASKED***"},
        "mood": "happy",
    }


def test_masks_password_in_connection_string():
    assert _sanitize_data("postgresql://mood:secret@db:5432/garden") == "postgresql://mood:***@db:5432/garden"


def test_masks_long_tokens():
    assert _sanitize_data("a" * 80) == "***MASKED***"


def test_leaves_plain_values_alone():
    assert _sanitize_data(["okay", 3, None]) == ["okay", 3, None]


def test_response_body_is_sanitized_as_json():
    body = '{"error": "Invalid request", "token": "abc"}'

    assert _sanitize_response_body(body) == '{"error": "Invalid request", "token": "***MASKED***"}'


def test_resolve_log_level():
    assert _resolve_log_level("debug") == (logging.DEBUG, False)
    assert _resolve_log_level("20") == (logging.INFO, False)
    assert _resolve_log_level("chatty") == (logging.INFO, True)
    assert _resolve_log_level("") == (logging.INFO, True)
