"""Editor open/close dispatch to mark tracking and undo history."""

from .events import (
    EditorEvent,
    EditorEventKind,
    LifecycleDispatcher,
    LifecycleListener,
)
from .listeners import (
    MarkTracker,
    MarkTrackingListener,
    UndoHistory,
    UndoHistoryListener,
)

__all__ = [
    "EditorEvent",
    "EditorEventKind",
    "LifecycleDispatcher",
    "LifecycleListener",
    "MarkTracker",
    "MarkTrackingListener",
    "UndoHistory",
    "UndoHistoryListener",
]
