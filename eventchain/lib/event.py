"""The per-firing event record."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


class Event:
    """One firing of a named event.

    Carries the bound arguments, the errors raised by listeners and the
    termination flag. The same instance is handed to every listener of a
    firing, so errors and vetoes are visible down the chain and to the caller.
    """

    def __init__(self, name: str, arguments: Mapping[str, Any] | None = None) -> None:
        self._name = name
        self._arguments = MappingProxyType(dict(arguments or {}))
        self._errors: list[str] = []
        self._terminated = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    @property
    def terminated(self) -> bool:
        return self._terminated

    @property
    def arguments(self) -> Mapping[str, Any]:
        return self._arguments

    def get_argument_names(self) -> list[str]:
        """Return argument names in declared order."""
        return list(self._arguments)

    def get_argument(self, name: str, default: Any = None) -> Any:
        return self._arguments.get(name, default)

    def terminate(self) -> None:
        """Stop any listeners after the current one from being called."""
        self._terminated = True

    def is_terminated(self) -> bool:
        return self._terminated

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def register_error(self, message: str) -> None:
        self._errors.append(message)

    def __repr__(self) -> str:
        return (
            f"Event(name={self._name!r}, arguments={dict(self._arguments)!r}, "
            f"errors={len(self._errors)}, terminated={self._terminated})"
        )
