"""Host capability interfaces and an in-memory reference host."""

from .memory import (
    MemoryDocument,
    MemoryEditor,
    MemoryFile,
    MemoryHost,
    MemoryImageEditor,
    MemoryProject,
    MemoryTextEditor,
)
from .protocols import (
    ChangeListener,
    Document,
    Editor,
    EditorHost,
    FileEditor,
    TextFileEditor,
)

__all__ = [
    "ChangeListener",
    "Document",
    "Editor",
    "EditorHost",
    "FileEditor",
    "TextFileEditor",
    "MemoryDocument",
    "MemoryEditor",
    "MemoryFile",
    "MemoryHost",
    "MemoryImageEditor",
    "MemoryProject",
    "MemoryTextEditor",
]
