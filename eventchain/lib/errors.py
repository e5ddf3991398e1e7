"""Exceptions raised by the dispatch engine."""

from __future__ import annotations


class EventChainError(Exception):
    """Base class for errors raised by eventchain."""


class InvalidArgumentCount(EventChainError, ValueError):
    """Raised when an event is fired with the wrong number of arguments."""

    def __init__(self, event_name: str, expected: int, actual: int) -> None:
        self.event_name = event_name
        self.expected = expected
        self.actual = actual
        super().__init__(f"Event '{event_name}' expects {expected} argument(s), got {actual}")
