"""Per-editor data façade used by the rest of the extension.

Combines the attribute store, the project/file resolver, and lifecycle
dispatch behind the calls commands make during an editing session.
"""

from __future__ import annotations

from typing import Any, Optional

from vim_editor.data import EditorDataStore, EditorSlot, ProjectFileResolver
from vim_editor.host.protocols import Editor, EditorHost
from vim_editor.lifecycle import (
    EditorEvent,
    EditorEventKind,
    LifecycleDispatcher,
    MarkTracker,
    MarkTrackingListener,
    UndoHistory,
    UndoHistoryListener,
)
from vim_editor.visual import VisualChange, VisualRange


class EditorData:
    """Entry point the rest of the extension calls with host editor handles.

    ``mark_tracker`` and ``undo_history`` are registered on the dispatcher as
    ``"marks"`` and ``"undo"``. A dispatcher shared between instances can
    carry those collaborators for only one of them; passing them again
    raises ``ValueError``.
    """

    def __init__(
        self,
        host: EditorHost,
        *,
        mark_tracker: Optional[MarkTracker] = None,
        undo_history: Optional[UndoHistory] = None,
        store: Optional[EditorDataStore] = None,
        resolver: Optional[ProjectFileResolver] = None,
        dispatcher: Optional[LifecycleDispatcher] = None,
        logger_name: str | None = None,
    ) -> None:
        self.host = host
        self.store = store if store is not None else EditorDataStore()
        if resolver is None:
            resolver = ProjectFileResolver(host, self.store, logger_name=logger_name)
        self.resolver = resolver
        if dispatcher is None:
            dispatcher = LifecycleDispatcher(logger_name=logger_name)
        self.dispatcher = dispatcher
        # Registration order is call order: marks, then undo.
        if mark_tracker is not None:
            self.dispatcher.register("marks", MarkTrackingListener(mark_tracker))
        if undo_history is not None:
            self.dispatcher.register("undo", UndoHistoryListener(undo_history))

    # -- lifecycle -----------------------------------------------------------

    def initialize_editor(self, editor: Editor) -> None:
        """Called by the host once a new editor is shown."""

        self.dispatcher.dispatch(EditorEvent(EditorEventKind.OPENED, editor))

    def uninitialize_editor(self, editor: Editor) -> None:
        """Called by the host when an editor is closed."""

        self.dispatcher.dispatch(EditorEvent(EditorEventKind.CLOSED, editor))

    # -- generic slot access ---------------------------------------------------

    def get(self, editor: Editor, slot: EditorSlot | str) -> Any:
        return self.store.get(editor, slot)

    def set(self, editor: Editor, slot: EditorSlot | str, value: Any) -> None:
        self.store.set(editor, slot, value)

    # -- typed accessors -------------------------------------------------------

    def get_last_column(self, editor: Editor) -> int:
        """Stored column, or the cursor's current visual column if never set."""

        column = self.store.get(editor, EditorSlot.LAST_COLUMN)
        if column is None:
            return self.host.current_visual_column(editor)
        return column

    def set_last_column(self, editor: Editor, column: int) -> None:
        self.store.set(editor, EditorSlot.LAST_COLUMN, column)

    def get_last_visual_range(self, editor: Editor) -> Optional[VisualRange]:
        return self.store.get(editor, EditorSlot.LAST_VISUAL)

    def set_last_visual_range(self, editor: Editor, range: VisualRange) -> None:
        self.store.set(editor, EditorSlot.LAST_VISUAL, range)

    def get_last_visual_operator_range(self, editor: Editor) -> Optional[VisualChange]:
        return self.store.get(editor, EditorSlot.LAST_VISUAL_OP)

    def set_last_visual_operator_range(
        self, editor: Editor, change: VisualChange
    ) -> None:
        self.store.set(editor, EditorSlot.LAST_VISUAL_OP, change)

    def get_project(self, editor: Editor) -> Any:
        return self.resolver.resolve_project(editor)

    def get_virtual_file(self, editor: Editor) -> Any:
        return self.resolver.resolve_file(editor)


__all__ = ["EditorData"]
