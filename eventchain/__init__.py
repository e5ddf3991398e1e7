from eventchain.lib.emitter import Emitter
from eventchain.lib.errors import EventChainError, InvalidArgumentCount
from eventchain.lib.event import Event
from eventchain.lib.invocation import Invocation, invoke
from eventchain.lib.observable import Observable
from eventchain.lib.signature import EventSignature
from eventchain.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    Emitter.__name__,
    Event.__name__,
    EventChainError.__name__,
    EventSignature.__name__,
    InvalidArgumentCount.__name__,
    Invocation.__name__,
    Observable.__name__,
    invoke.__name__,
]
