"""Tests for the failure-isolating listener call."""

from __future__ import annotations

import logging

from eventchain.config import Config, DevelopmentConfig, TestingConfig
from eventchain.lib.dispatch import call_listener, failure_message
from eventchain.lib.event import Event


def test_call_listener_success(make_callback):
    event = Event("moved")
    callback = make_callback()

    assert call_listener(callback, event) is True
    assert callback.call_count == 1
    assert event.has_errors() is False


def test_call_listener_failure_is_recorded(make_callback):
    event = Event("moved")

    assert call_listener(make_callback(fail_with="boom"), event) is False
    assert event.errors == ["boom"]


def test_failure_message_formats():
    assert failure_message(ValueError("bad value")) == "bad value"
    assert failure_message(ValueError()) == "ValueError"

    class WithType(Config):
        INCLUDE_EXCEPTION_TYPE = True

    assert failure_message(ValueError("bad value"), WithType) == "ValueError: bad value"


def test_failure_is_logged(make_callback, caplog):
    with caplog.at_level(logging.ERROR):
        call_listener(make_callback(fail_with="boom"), Event("moved"))

    assert "failed for event 'moved': boom" in caplog.text


def test_failure_logging_can_be_disabled(make_callback, caplog):
    with caplog.at_level(logging.ERROR):
        call_listener(make_callback(fail_with="boom"), Event("moved"), TestingConfig)

    assert caplog.records == []


def test_development_config_logs_traceback_and_dispatch(make_callback, caplog):
    with caplog.at_level(logging.DEBUG):
        call_listener(make_callback(fail_with="boom"), Event("moved"), DevelopmentConfig)

    assert "Calling listener" in caplog.text
    failures = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(failures) == 1
    assert failures[0].exc_info is not None
