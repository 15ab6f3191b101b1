"""EventStore Binding Module - Store-to-render-host adapter."""

from .adapter import StoreBinding, use_store
from .component import Component
from .host import RenderHost, current_host, rendering

__all__ = [
    "StoreBinding",
    "use_store",
    "Component",
    "RenderHost",
    "current_host",
    "rendering",
]
