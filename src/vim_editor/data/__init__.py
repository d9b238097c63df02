"""Editor-scoped attribute storage and owning project/file lookup."""

from .resolver import ProjectFileResolver
from .slots import EditorAttributes, EditorSlot, SlotTypeError, UnknownSlotError
from .store import EditorDataStore

__all__ = [
    "EditorAttributes",
    "EditorDataStore",
    "EditorSlot",
    "ProjectFileResolver",
    "SlotTypeError",
    "UnknownSlotError",
]
