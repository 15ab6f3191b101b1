"""EventStore State Module - Observable state container."""

from .merge import shallow_merge
from .state_store import EventStore, Registration, Observer, Cancel

__all__ = [
    "EventStore",
    "Registration",
    "Observer",
    "Cancel",
    "shallow_merge",
]
