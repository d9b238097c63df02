"""Adapters turning lifecycle events into mark tracking and undo calls."""

from __future__ import annotations

from typing import Any, Protocol

from vim_editor.data.identity import IdentityMap, weak_handle
from vim_editor.host.protocols import ChangeListener, Editor

from .events import EditorEvent, EditorEventKind


class MarkTracker(Protocol):
    """Keeps editor-relative marks in place as text shifts."""

    def on_document_changed(self, editor: Editor, change: Any) -> None:
        ...


class UndoHistory(Protocol):
    """Undo bookkeeping keyed by the editor's document."""

    def editor_opened(self, editor: Editor) -> None:
        ...

    def editor_closed(self, editor: Editor) -> None:
        ...


class MarkTrackingListener:
    """Attaches one change observer per non-viewer editor."""

    def __init__(self, tracker: MarkTracker) -> None:
        self.tracker = tracker
        self._observers: IdentityMap[ChangeListener] = IdentityMap()

    def __call__(self, event: EditorEvent) -> None:
        if event.kind is EditorEventKind.OPENED:
            self._attach(event.editor)
        elif event.kind is EditorEventKind.CLOSED:
            self._detach(event.editor)

    def is_tracking(self, editor: Any) -> bool:
        return editor in self._observers

    def _attach(self, editor: Editor) -> None:
        if editor.is_viewer() or editor in self._observers:
            return

        editor_ref = weak_handle(editor)

        def forward(change: Any) -> None:
            target = editor_ref()
            if target is not None:
                self.tracker.on_document_changed(target, change)

        editor.document.add_change_listener(forward)
        self._observers.put(editor, forward)

    def _detach(self, editor: Editor) -> None:
        observer = self._observers.pop(editor)
        if observer is not None:
            editor.document.remove_change_listener(observer)


class UndoHistoryListener:
    def __init__(self, history: UndoHistory) -> None:
        self.history = history

    def __call__(self, event: EditorEvent) -> None:
        if event.kind is EditorEventKind.OPENED:
            self.history.editor_opened(event.editor)
        elif event.kind is EditorEventKind.CLOSED:
            self.history.editor_closed(event.editor)


__all__ = [
    "MarkTracker",
    "MarkTrackingListener",
    "UndoHistory",
    "UndoHistoryListener",
]
