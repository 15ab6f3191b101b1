"""
EventStore Binding Adapter

Bridges store notifications to a render host.

StoreBinding is the scoped subscription: attach() acquires it, detach()
releases it, and the context-manager form guarantees release. use_store()
is the hook-style facade a component calls on every render.
"""

from __future__ import annotations
from typing import Any, Callable, Optional
import logging

from ..state.state_store import Cancel, EventStore
from .host import RenderHost, current_host


logger = logging.getLogger(__name__)


class StoreBinding:
    """
    Subscription of a single change callback to at most one store.

    Every notification calls ``on_change`` exactly once; nothing is
    buffered or coalesced.
    """

    def __init__(self, on_change: Callable[[], None]):
        self._on_change = on_change
        self._store: Optional[EventStore] = None
        self._cancel: Optional[Cancel] = None

    @property
    def store(self) -> Optional[EventStore]:
        """The store currently attached, if any."""
        return self._store

    @property
    def attached(self) -> bool:
        return self._cancel is not None

    def attach(self, store: EventStore) -> "StoreBinding":
        """
        Subscribe to ``store``, releasing any previous subscription first.

        Attaching again to the store already attached is a no-op.
        """
        if store is self._store and self._cancel is not None:
            return self
        self.detach()
        self._cancel = store.subscribe(self._handle_change)
        self._store = store
        logger.debug(f"Binding attached to {store.name}")
        return self

    def detach(self) -> None:
        """Release the subscription. Safe to call repeatedly."""
        cancel, self._cancel = self._cancel, None
        store, self._store = self._store, None
        if cancel is not None:
            cancel()
            logger.debug(f"Binding detached from {store.name}")

    def _handle_change(self, previous: Any, current: Any) -> None:
        self._on_change()

    def __enter__(self) -> "StoreBinding":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.detach()


def use_store(store: EventStore, host: Optional[RenderHost] = None) -> Any:
    """
    Subscribe the rendering component to ``store`` and return its state.

    Call once per render. The subscription is made as a mount effect keyed
    on the store's identity: it is released on unmount and replaced when a
    different store is passed.

    Args:
        store: Store to observe
        host: Host of the component (defaults to the host currently rendering)

    Returns:
        The store's current state, read fresh for this render

    Raises:
        RuntimeError: If no render of the host is in progress
    """
    if host is None:
        host = current_host()
    if host is None:
        raise RuntimeError("use_store() called outside of a component render")

    def subscribe_effect():
        binding = StoreBinding(host.request_render)
        binding.attach(store)
        return binding.detach

    host.use_effect(subscribe_effect, (store,))
    return store.read()
