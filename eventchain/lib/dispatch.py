"""Failure-isolating listener call shared by emitters and one-off invocations."""

from __future__ import annotations

import logging
from typing import Callable

from eventchain.config import Config
from eventchain.lib.event import Event

EventCallback = Callable[[Event], None]


def failure_message(exc: Exception, config: type[Config] = Config) -> str:
    """Turn a listener exception into the message stored on the event."""
    try:
        message = str(exc)
    except Exception:
        message = ""
    message = message or type(exc).__name__
    if config.INCLUDE_EXCEPTION_TYPE:
        return f"{type(exc).__name__}: {message}"
    return message


def call_listener(callback: EventCallback, event: Event, config: type[Config] = Config) -> bool:
    """Call a listener with the event, recording any failure on the event.

    Returns True if the listener returned normally.
    """
    if config.LOG_DISPATCH:
        logging.debug(f"Calling listener {callback!r} for event '{event.name}'")
    try:
        callback(event)
    except Exception as e:
        message = failure_message(e, config)
        event.register_error(message)
        if config.LOG_LISTENER_FAILURES:
            if config.LOG_TRACEBACKS:
                logging.exception(f"Listener {callback!r} failed for event '{event.name}'")
            else:
                logging.error(f"Listener {callback!r} failed for event '{event.name}': {message}")
        return False
    return True
