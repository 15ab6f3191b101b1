"""
EventStore Shallow Merge

Single-level merge of a partial update into a state snapshot.

Supported state shapes:
- Mapping: merged into a new dict
- pydantic model: merged with model_copy(update=...)
- dataclass instance: merged with dataclasses.replace()

Nested values are replaced wholesale, never merged. The current snapshot
is never modified; a new object is always returned.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, TypeVar, Union
import dataclasses

from pydantic import BaseModel


S = TypeVar("S")

Partial = Union[Mapping[str, Any], BaseModel]


def partial_items(partial: Partial) -> Dict[str, Any]:
    """
    Flatten a partial update into a plain dict of top-level keys.

    A pydantic model contributes only the fields that were explicitly set,
    so defaults never overwrite existing state.
    """
    if isinstance(partial, BaseModel):
        return {name: getattr(partial, name) for name in partial.model_fields_set}
    return dict(partial)


def shallow_merge(current: S, partial: Partial) -> S:
    """
    Merge top-level keys of ``partial`` into a copy of ``current``.

    Args:
        current: Current state snapshot
        partial: Keys to overwrite

    Returns:
        A new snapshot of the same shape as ``current``

    Raises:
        TypeError: If ``current`` is not a supported state shape
    """
    changes = partial_items(partial)

    if isinstance(current, BaseModel):
        return current.model_copy(update=changes)

    if dataclasses.is_dataclass(current) and not isinstance(current, type):
        return dataclasses.replace(current, **changes)

    if isinstance(current, Mapping):
        merged = dict(current)
        merged.update(changes)
        return merged  # type: ignore[return-value]

    raise TypeError(f"Cannot merge into state of type {type(current).__name__}")
