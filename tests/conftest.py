"""Pytest fixtures for eventchain tests."""

from __future__ import annotations

from typing import Any

import pytest

from eventchain.lib.emitter import Emitter
from eventchain.lib.event import Event
from eventchain.lib.observable import Observable


class MockCallback:
    """Recording listener that can veto or fail on every call."""

    def __init__(self, terminate: bool = False, fail_with: str | None = None) -> None:
        self.terminate = terminate
        self.fail_with = fail_with
        self.call_count = 0
        self.events: list[Event] = []

    def __call__(self, event: Event) -> None:
        self.call_count += 1
        self.events.append(event)
        if self.terminate:
            event.terminate()
        if self.fail_with is not None:
            raise RuntimeError(self.fail_with)


class EventBuilder:
    """Fluent constructor for expected events, bypassing any emitter."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._arguments: dict[str, Any] = {}
        self._errors: list[str] = []
        self._terminated = False

    def with_argument(self, key: str, value: Any) -> EventBuilder:
        self._arguments[key] = value
        return self

    def with_error(self, message: str) -> EventBuilder:
        self._errors.append(message)
        return self

    def terminated(self) -> EventBuilder:
        self._terminated = True
        return self

    def build(self) -> Event:
        event = Event(self._name, self._arguments)
        for message in self._errors:
            event.register_error(message)
        if self._terminated:
            event.terminate()
        return event


class MockObservable(Observable):
    """Observable declaring a couple of events, the way an application class would."""

    def __init__(self) -> None:
        super().__init__(
            [
                Emitter.declare("moved", "x", "y"),
                Emitter.declare("reset"),
            ]
        )


@pytest.fixture
def make_callback():
    """Factory for MockCallback instances."""
    return MockCallback


@pytest.fixture
def event_builder():
    """Factory for EventBuilder instances."""
    return EventBuilder


@pytest.fixture
def moved_emitter():
    """An emitter declaring arguments x and y."""
    return Emitter.declare("moved", "x", "y")


@pytest.fixture
def observable():
    return MockObservable()
