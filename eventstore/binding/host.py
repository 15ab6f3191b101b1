"""
RenderHost Base Interface

Abstract interface of the UI host a store binding talks to.

The host's scheduling and rendering pipeline is opaque; the binding only
needs two capabilities:
- request_render(): re-render the consuming component
- use_effect(): run an effect after mount, clean it up before unmount
  or when its dependencies change
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable, Iterator, Optional, Sequence


Cleanup = Callable[[], None]
Effect = Callable[[], Optional[Cleanup]]


_current_host: ContextVar[Optional["RenderHost"]] = ContextVar("eventstore_render_host", default=None)


class RenderHost(ABC):
    """Host that renders a component and runs its effects."""

    @abstractmethod
    def request_render(self) -> None:
        """Ask the host to re-render the component."""
        pass

    @abstractmethod
    def use_effect(self, effect: Effect, deps: Sequence[object]) -> None:
        """
        Declare an effect for the render in progress.

        Args:
            effect: Called after the component is mounted; may return a cleanup
            deps: The effect re-runs (after cleanup) when any item changes identity
        """
        pass


def current_host() -> Optional[RenderHost]:
    """Return the host whose render is in progress, if any."""
    return _current_host.get()


@contextmanager
def rendering(host: RenderHost) -> Iterator[RenderHost]:
    """Mark ``host`` as the current host for the duration of a render."""
    token = _current_host.set(host)
    try:
        yield host
    finally:
        _current_host.reset(token)
