"""
In-Memory Render Host

Minimal synchronous component host, for testing and headless use.

A Component wraps a render function. Hooks called from the render
function (use_store, use_effect) find the component through
current_host(). Effects are committed after each render, in
declaration order.
"""

from __future__ import annotations
from typing import Any, Callable, List, Optional, Sequence, Tuple
from dataclasses import dataclass
import logging

from .host import Cleanup, Effect, RenderHost, current_host, rendering


logger = logging.getLogger(__name__)


@dataclass(eq=False)
class EffectSlot:
    """Effect declared at one hook position."""
    deps: Tuple[object, ...]
    pending: Optional[Effect] = None
    cleanup: Optional[Cleanup] = None


def _deps_changed(old: Tuple[object, ...], new: Tuple[object, ...]) -> bool:
    if len(old) != len(new):
        return True
    return any(a is not b for a, b in zip(old, new))


class Component(RenderHost):
    """
    Synchronous in-memory component.

    Use for:
    - Unit testing bindings
    - Headless / console front-ends

    A render requested while rendering or committing effects is deferred
    and performed once the current render completes. Hooks may only be
    declared while the component itself is rendering.
    """

    def __init__(self, render_fn: Callable[[], Any], name: Optional[str] = None):
        self._render_fn = render_fn
        self._slots: List[EffectSlot] = []
        self._slot_index = 0
        self._busy = False
        self._dirty = False
        self.name = name or getattr(render_fn, "__name__", "component")
        self.mounted = False
        self.render_count = 0
        self.render_requests = 0
        self.last_output: Any = None

    def __repr__(self) -> str:
        return f"<Component {self.name} mounted={self.mounted} renders={self.render_count}>"

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def mount(self) -> Any:
        """Render for the first time and run effects. Returns the render output."""
        if not self.mounted:
            self.mounted = True
            logger.debug(f"Mounting {self.name}")
            try:
                self._render()
            except Exception:
                # A failed first render leaves the component unmounted
                self.unmount()
                raise
        return self.last_output

    def unmount(self) -> None:
        """Run every effect cleanup and stop rendering."""
        if not self.mounted:
            return
        self.mounted = False
        slots, self._slots = self._slots, []
        logger.debug(f"Unmounting {self.name} ({len(slots)} effect(s))")
        for slot in slots:
            if slot.cleanup is not None:
                cleanup, slot.cleanup = slot.cleanup, None
                cleanup()

    # =========================================================================
    # RenderHost
    # =========================================================================

    def request_render(self) -> None:
        self.render_requests += 1
        if not self.mounted:
            return
        if self._busy:
            self._dirty = True
            return
        self._render()

    def use_effect(self, effect: Effect, deps: Sequence[object]) -> None:
        if current_host() is not self:
            raise RuntimeError(f"use_effect() called outside of a render of {self.name}")
        deps = tuple(deps)
        index = self._slot_index
        self._slot_index += 1

        if index == len(self._slots):
            self._slots.append(EffectSlot(deps=deps, pending=effect))
            return

        slot = self._slots[index]
        if _deps_changed(slot.deps, deps):
            slot.deps = deps
            slot.pending = effect

    # =========================================================================
    # Internals
    # =========================================================================

    def _render(self) -> None:
        while True:
            self._dirty = False
            self._busy = True
            try:
                self._slot_index = 0
                with rendering(self):
                    self.last_output = self._render_fn()
                self.render_count += 1
                if self.mounted:
                    self._commit_effects()
                else:
                    self._slots = []
            finally:
                self._busy = False
            if not (self._dirty and self.mounted):
                return

    def _commit_effects(self) -> None:
        for slot in self._slots:
            if slot.pending is None:
                continue
            effect, slot.pending = slot.pending, None
            if slot.cleanup is not None:
                cleanup, slot.cleanup = slot.cleanup, None
                cleanup()
            slot.cleanup = effect()
            if not self.mounted:
                # Unmounted by this effect; its slot is no longer tracked
                if slot.cleanup is not None:
                    cleanup, slot.cleanup = slot.cleanup, None
                    cleanup()
                return
