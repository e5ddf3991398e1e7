"""Registry of emitters keyed by event name."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from eventchain.config import Config
from eventchain.lib.dispatch import EventCallback
from eventchain.lib.emitter import Emitter
from eventchain.lib.event import Event


class Observable:
    """Exposes a fixed set of named events to external code.

    Subclasses declare their events by passing emitters to ``__init__``:

        class Player(Observable):
            def __init__(self):
                super().__init__([Emitter.declare("moved", "x", "y")])

    Unknown event names never raise: adding a listener or removing the event
    is a no-op, and firing returns None so callers can tell "no such event"
    apart from "fired with no listeners".
    """

    def __init__(
        self, emitters: Iterable[Emitter] = (), config: type[Config] | None = None
    ) -> None:
        self._event_emitters: dict[str, Emitter] = {}
        self.config = config
        self.register_events(emitters)

    def register_event(self, emitter: Emitter) -> None:
        """Register an emitter under its own event name, replacing any existing one."""
        name = emitter.event_name
        if name in self._event_emitters:
            logging.debug(f"Replacing emitter for event '{name}'")
        self._event_emitters[name] = emitter

    def register_events(self, emitters: Iterable[Emitter]) -> None:
        for emitter in emitters:
            self.register_event(emitter)

    def add_event_listener(self, name: str, callback: EventCallback) -> None:
        """Add a listener to the named event. Does nothing if the event isn't registered."""
        emitter = self._event_emitters.get(name)
        if emitter is None:
            logging.debug(f"Ignoring listener for unregistered event '{name}'")
            return
        emitter.add_listener(callback)

    def fire_event(self, name: str, args: Sequence[Any] | None = None) -> Event | None:
        """Fire the named event.

        Returns:
            The dispatched event, or None if no event is registered under ``name``.

        Raises:
            InvalidArgumentCount: If ``args`` doesn't match the event's argument names.
        """
        emitter = self._event_emitters.get(name)
        if emitter is None:
            logging.debug(f"Not firing unregistered event '{name}'")
            return None
        return emitter.fire(args or (), default_config=self.config)

    def get_events(self) -> list[str]:
        """Return registered event names in registration order."""
        return list(self._event_emitters)

    def has_event(self, name: str) -> bool:
        return name in self._event_emitters

    def get_emitter(self, name: str) -> Emitter | None:
        return self._event_emitters.get(name)

    def remove_event(self, name: str) -> None:
        if self._event_emitters.pop(name, None) is not None:
            logging.debug(f"Removed event '{name}'")
