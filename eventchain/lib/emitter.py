"""Listener chain for a single declared event."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from eventchain.config import Config
from eventchain.lib.dispatch import EventCallback, call_listener
from eventchain.lib.event import Event
from eventchain.lib.signature import EventSignature


class Emitter:
    """Owns the ordered listeners of one named event and fires it.

    Positional arguments passed to ``fire`` are bound to the signature's
    argument names, in order. Listeners run in registration order against a
    single shared ``Event``; a listener that raises is recorded as an error on
    the event and the next listener still runs, while a listener that calls
    ``event.terminate()`` stops the chain.
    """

    def __init__(self, signature: EventSignature, config: type[Config] | None = None) -> None:
        self._signature = signature
        self.config = config
        self.listeners: list[EventCallback] = []

    @classmethod
    def declare(cls, event_name: str, *argument_names: str, **kwargs: Any) -> Emitter:
        """Shortcut for ``Emitter(EventSignature(event_name, argument_names))``."""
        return cls(EventSignature(event_name, argument_names), **kwargs)

    @property
    def signature(self) -> EventSignature:
        return self._signature

    @property
    def event_name(self) -> str:
        return self._signature.name

    @property
    def argument_names(self) -> tuple[str, ...]:
        return self._signature.argument_names

    def add_listener(self, callback: EventCallback) -> EventCallback:
        """Append a listener. Returns it so this can be used as a decorator."""
        self.listeners.append(callback)
        logging.debug(f"Added listener {callback!r} to event '{self.event_name}'")
        return callback

    def fire(
        self, args: Sequence[Any] = (), default_config: type[Config] | None = None
    ) -> Event:
        """Fire the event and return it once every listener had its turn.

        Args:
            args: One value per declared argument name, in declared order.
            default_config: Config used when the emitter has none of its own.

        Returns:
            The dispatched event, carrying listener errors and the termination flag.

        Raises:
            InvalidArgumentCount: If ``len(args)`` differs from the number of
                declared argument names. No listener is called in that case.
        """
        arguments = self._signature.bind(args)
        event = Event(self.event_name, arguments)
        config = self.config or default_config or Config

        # Listeners added while firing are picked up by the next firing
        listeners = list(self.listeners)
        logging.debug(f"Firing '{self.event_name}' to {len(listeners)} listener(s)")
        for listener in listeners:
            call_listener(listener, event, config)
            if event.is_terminated():
                logging.debug(f"Event '{self.event_name}' terminated by {listener!r}")
                break
        return event

    def __len__(self) -> int:
        return len(self.listeners)

    def __repr__(self) -> str:
        return f"Emitter({self.event_name!r}, {list(self.argument_names)!r})"
