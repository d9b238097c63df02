"""Mappings keyed by object identity over host-owned handles.

Host handles need not be hashable, may compare equal to each other, and may
refuse weak references (``__slots__`` classes). Entries are keyed by ``id``.
A weak-referenceable handle gets a finalizer that drops its entry when the
handle is collected; any other handle is pinned by its entry until removed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar
from weakref import finalize, ref

V = TypeVar("V")


@dataclass(slots=True)
class _Entry:
    value: Any
    # Either a ``weakref.finalize`` or the handle itself.
    anchor: Any
    weak: bool


class IdentityMap(Generic[V]):
    def __init__(self) -> None:
        self._entries: Dict[int, _Entry] = {}

    def get(self, handle: Any) -> Optional[V]:
        entry = self._entries.get(id(handle))
        return None if entry is None else entry.value

    def put(self, handle: Any, value: V) -> V:
        key = id(handle)
        current = self._entries.get(key)
        if current is not None:
            current.value = value
            return value
        try:
            anchor: Any = finalize(handle, self._entries.pop, key, None)
        except TypeError:
            self._entries[key] = _Entry(value, handle, weak=False)
        else:
            anchor.atexit = False
            self._entries[key] = _Entry(value, anchor, weak=True)
        return value

    def pop(self, handle: Any) -> Optional[V]:
        entry = self._entries.pop(id(handle), None)
        if entry is None:
            return None
        if entry.weak:
            entry.anchor.detach()
        return entry.value

    def __contains__(self, handle: object) -> bool:
        return id(handle) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def weak_handle(handle: Any) -> Callable[[], Any]:
    """Return a callable yielding ``handle``, weakly when the handle allows it."""

    try:
        return ref(handle)
    except TypeError:
        return lambda: handle


__all__ = ["IdentityMap", "weak_handle"]
