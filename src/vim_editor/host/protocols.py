"""Boundary types describing what the extension needs from a host editor."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol, runtime_checkable

ChangeListener = Callable[[Any], None]


class Document(Protocol):
    """Text storage shared by every editor showing the same file."""

    def add_change_listener(self, listener: ChangeListener) -> None:
        """Call ``listener(change)`` after every content change."""
        ...

    def remove_change_listener(self, listener: ChangeListener) -> None:
        ...


class Editor(Protocol):
    """One open view onto a document. Owned by the host.

    Handles are tracked by identity: they need not be hashable or weakly
    referenceable, and two distinct handles that compare equal stay distinct.
    """

    @property
    def document(self) -> Document:
        ...

    def is_viewer(self) -> bool:
        """Return ``True`` for read-only views."""
        ...


class FileEditor(Protocol):
    """Anything the host opens for a file: text views, image viewers, designers."""


@runtime_checkable
class TextFileEditor(Protocol):
    """A file editor backed by a text ``Editor``."""

    @property
    def text_editor(self) -> Any:
        ...


class EditorHost(Protocol):
    """Queries the extension runs against the host application.

    Enumeration order is whatever the host reports; callers must not rely
    on it being stable.
    """

    def list_open_projects(self) -> Iterable[Any]:
        ...

    def list_open_files(self, project: Any) -> Iterable[Any]:
        ...

    def list_editors_for(self, project: Any, file: Any) -> Iterable[FileEditor]:
        ...

    def current_visual_column(self, editor: Editor) -> int:
        ...


__all__ = [
    "ChangeListener",
    "Document",
    "Editor",
    "EditorHost",
    "FileEditor",
    "TextFileEditor",
]
