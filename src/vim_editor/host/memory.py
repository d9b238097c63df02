"""In-memory host used for embedding without a real editor and in tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from vim_editor.visual import Cursor

from .protocols import ChangeListener, FileEditor


@dataclass(frozen=True, slots=True)
class DocumentChange:
    """Payload delivered to change listeners after ``MemoryDocument.replace``."""

    start: int
    old_length: int
    new_text: str
    version: int


@dataclass(frozen=True, slots=True)
class MemoryFile:
    path: str


@dataclass(eq=False)
class MemoryDocument:
    """Plain text with change listeners, keyed by identity."""

    text: str = ""
    version: int = 0
    _listeners: List[ChangeListener] = field(default_factory=list, repr=False)

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def lines(self) -> Sequence[str]:
        return tuple(self.text.split("\n"))

    def replace(self, start: int, end: int, text: str) -> DocumentChange:
        """Replace ``[start:end]`` with ``text`` and notify listeners."""

        if not 0 <= start <= end <= len(self.text):
            raise IndexError(f"Range {start}:{end} outside document")
        self.text = self.text[:start] + text + self.text[end:]
        self.version += 1
        change = DocumentChange(
            start=start, old_length=end - start, new_text=text, version=self.version
        )
        for listener in list(self._listeners):
            listener(change)
        return change


@dataclass(eq=False)
class MemoryEditor:
    document: MemoryDocument
    viewer: bool = False
    cursor: Cursor = (0, 0)
    tab_size: int = 4

    def is_viewer(self) -> bool:
        return self.viewer

    def visual_column(self) -> int:
        row, col = self.cursor
        line = self.document.lines()[row]
        column = 0
        for char in line[:col]:
            if char == "\t":
                column += self.tab_size - (column % self.tab_size)
            else:
                column += 1
        return column


@dataclass(eq=False)
class MemoryTextEditor:
    """File editor wrapping a text ``MemoryEditor``."""

    text_editor: MemoryEditor


@dataclass(eq=False)
class MemoryImageEditor:
    """File editor with no text component."""

    file: MemoryFile


@dataclass(eq=False)
class MemoryProject:
    name: str
    _editors: Dict[MemoryFile, List[FileEditor]] = field(
        default_factory=dict, repr=False
    )

    def open_file(self, file: MemoryFile, *editors: FileEditor) -> None:
        self._editors.setdefault(file, []).extend(editors)

    def close_file(self, file: MemoryFile) -> None:
        self._editors.pop(file, None)

    def open_files(self) -> List[MemoryFile]:
        return list(self._editors)

    def editors_for(self, file: MemoryFile) -> List[FileEditor]:
        return list(self._editors.get(file, ()))


class MemoryHost:
    """Satisfies ``EditorHost`` over plain Python objects."""

    def __init__(self, projects: Optional[Iterable[MemoryProject]] = None) -> None:
        self._projects: List[MemoryProject] = list(projects or ())

    def open_project(self, project: MemoryProject) -> MemoryProject:
        self._projects.append(project)
        return project

    def close_project(self, project: MemoryProject) -> None:
        self._projects.remove(project)

    def list_open_projects(self) -> List[MemoryProject]:
        return list(self._projects)

    def list_open_files(self, project: MemoryProject) -> List[MemoryFile]:
        return project.open_files()

    def list_editors_for(
        self, project: MemoryProject, file: MemoryFile
    ) -> List[FileEditor]:
        return project.editors_for(file)

    def current_visual_column(self, editor: MemoryEditor) -> int:
        return editor.visual_column()


__all__ = [
    "DocumentChange",
    "MemoryDocument",
    "MemoryEditor",
    "MemoryFile",
    "MemoryHost",
    "MemoryImageEditor",
    "MemoryProject",
    "MemoryTextEditor",
]
