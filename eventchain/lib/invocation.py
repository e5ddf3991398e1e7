"""Call a single callback with an ad-hoc event, outside any registry."""

from __future__ import annotations

import logging
from typing import Any

from eventchain.config import Config
from eventchain.lib.dispatch import EventCallback, call_listener
from eventchain.lib.event import Event


class Invocation:
    """Fluent builder for a one-off callback call.

    There is no declared schema, so no argument count is checked. Failures
    are recorded on the returned event the same way ``Emitter.fire`` does.
    """

    def __init__(
        self, callback: EventCallback, name: str = "", config: type[Config] | None = None
    ) -> None:
        self._callback = callback
        self._name = name
        self._config = config or Config
        self._arguments: dict[str, Any] = {}

    def with_argument(self, key: str, value: Any) -> Invocation:
        self._arguments[key] = value
        return self

    def run(self) -> Event:
        event = Event(self._name, self._arguments)
        if not call_listener(self._callback, event, self._config):
            logging.debug(f"One-off invocation of {self._callback!r} recorded an error")
        return event


def invoke(callback: EventCallback, name: str = "", /, **arguments: Any) -> Event:
    """Call ``callback`` once with an event carrying ``arguments``."""
    invocation = Invocation(callback, name)
    for key, value in arguments.items():
        invocation.with_argument(key, value)
    return invocation.run()
