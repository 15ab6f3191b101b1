"""
EventStore - Minimal Observable State Container

EventStore holds one state snapshot and:
- Shallow-merges partial updates into a new snapshot
- Notifies observers with (previous, next) after every update
- Binds components of a render host so they re-render on change

EventStore does NOT:
- Persist state
- Dispatch actions or compute derived state
- Deep-merge nested values
"""

__version__ = "0.1.0"

from .state.state_store import EventStore, Registration
from .state.merge import shallow_merge
from .binding.adapter import StoreBinding, use_store
from .binding.component import Component
from .binding.host import RenderHost, current_host
from .config import get_config, load_config, reset_config, configure_logging

__all__ = [
    # Store
    "EventStore",
    "Registration",
    "shallow_merge",
    # Binding
    "StoreBinding",
    "use_store",
    "Component",
    "RenderHost",
    "current_host",
    # Config
    "get_config",
    "load_config",
    "reset_config",
    "configure_logging",
]
