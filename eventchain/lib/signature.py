"""Name and argument schema of a declared event."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from eventchain.lib.errors import InvalidArgumentCount


@dataclass(frozen=True)
class EventSignature:
    """The name of an event and the ordered names of its arguments."""

    name: str
    argument_names: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the schema can't change
        object.__setattr__(self, "argument_names", tuple(self.argument_names))

    @property
    def arity(self) -> int:
        return len(self.argument_names)

    def bind(self, values: Sequence[Any]) -> dict[str, Any]:
        """Bind positional values to argument names.

        Raises:
            InvalidArgumentCount: If the number of values doesn't match the schema.
        """
        if len(values) != self.arity:
            raise InvalidArgumentCount(self.name, self.arity, len(values))
        return dict(zip(self.argument_names, values))
