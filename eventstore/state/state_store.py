"""
EventStore State Store

Holds a single state snapshot and notifies observers when it is replaced.

Key behaviour:
- update() shallow-merges a partial into a NEW snapshot
- Observers receive (previous, next) synchronously, in subscription order
- Each notification pass runs over a copy of the registration list
- Observer exceptions propagate to the caller of update()
"""

from __future__ import annotations
from typing import Any, Callable, Generic, List, Optional, TypeVar
from dataclasses import dataclass
import logging

from .merge import Partial, shallow_merge


logger = logging.getLogger(__name__)


S = TypeVar("S")

Observer = Callable[[Any, Any], None]
Cancel = Callable[[], None]


# =============================================================================
# Registrations
# =============================================================================

@dataclass(eq=False)
class Registration:
    """A single subscription of an observer to a store."""
    observer: Observer
    active: bool = True


# =============================================================================
# Event Store
# =============================================================================

class EventStore(Generic[S]):
    """
    Observable state container.

    Features:
    - Shallow-merge updates producing new snapshots
    - Ordered, synchronous observer notification
    - Idempotent cancel functions per registration
    - Safe subscribe/unsubscribe while a notification is in progress

    Stores are independent; nothing is shared between instances.
    """

    def __init__(self, initial: Optional[S] = None, *, name: Optional[str] = None):
        """
        Initialize the store.

        Args:
            initial: Initial state (defaults to an empty dict)
            name: Optional label used in log records
        """
        self._state: S = initial if initial is not None else {}  # type: ignore[assignment]
        self._registrations: List[Registration] = []
        self.name = name or f"store-{id(self):x}"

    def __repr__(self) -> str:
        return f"<EventStore {self.name} observers={self.observer_count}>"

    @property
    def observer_count(self) -> int:
        """Number of active registrations."""
        return len(self._registrations)

    def read(self) -> S:
        """Return the current snapshot."""
        return self._state

    def update(self, partial: Partial) -> None:
        """
        Merge ``partial`` into the state and notify observers.

        The new snapshot is installed before any observer runs. If an
        observer raises, the exception propagates and observers later in
        the pass are not called; the state change is kept.

        Args:
            partial: Top-level keys to overwrite
        """
        previous = self._state
        self._state = shallow_merge(previous, partial)
        self._notify(previous, self._state)

    def subscribe(self, observer: Observer) -> Cancel:
        """
        Register an observer.

        Args:
            observer: Callable invoked as observer(previous, next)

        Returns:
            Cancel function removing this registration (idempotent)
        """
        registration = Registration(observer=observer)
        self._registrations.append(registration)
        logger.debug(f"Subscribed observer on {self.name} ({self.observer_count} active)")

        def cancel() -> None:
            self._remove(registration)

        return cancel

    def unsubscribe(self, observer: Observer) -> None:
        """
        Remove the most recently added registration of ``observer``.

        Other registrations of the same observer stay active. Unknown
        observers are ignored.
        """
        for registration in reversed(self._registrations):
            if registration.observer == observer:
                self._remove(registration)
                return
        logger.debug(f"Unsubscribe on {self.name}: observer not registered")

    # Names used by the original event-emitter API
    get_state = read
    set_state = update
    enlist = subscribe

    def _remove(self, registration: Registration) -> None:
        if not registration.active:
            return
        registration.active = False
        self._registrations.remove(registration)
        logger.debug(f"Removed observer from {self.name} ({self.observer_count} active)")

    def _notify(self, previous: S, current: S) -> None:
        """Notify every observer registered when the pass begins."""
        registrations = list(self._registrations)
        if not registrations:
            return
        logger.debug(f"Notifying {len(registrations)} observer(s) on {self.name}")
        for registration in registrations:
            registration.observer(previous, current)
