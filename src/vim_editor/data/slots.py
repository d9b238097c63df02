"""Named per-editor slots and the record holding them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Type

from vim_editor.visual import VisualChange, VisualRange


class UnknownSlotError(KeyError):
    """Raised when a slot is addressed by a name that does not exist."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown editor slot {name!r}")
        self.name = name


class SlotTypeError(TypeError):
    """Raised when a value does not fit the slot it is written to."""

    def __init__(self, slot: "EditorSlot", value: object, reason: str) -> None:
        super().__init__(f"Slot '{slot.value}' {reason}, got {value!r}")
        self.slot = slot
        self.value = value


class EditorSlot(str, Enum):
    LAST_COLUMN = "lastColumn"
    PROJECT = "project"
    VIRTUAL_FILE = "virtualFile"
    LAST_VISUAL = "lastVisual"
    LAST_VISUAL_OP = "lastVisualOp"

    @classmethod
    def parse(cls, slot: "EditorSlot | str") -> "EditorSlot":
        if isinstance(slot, cls):
            return slot
        try:
            return cls(slot)
        except ValueError:
            raise UnknownSlotError(slot) from None

    @property
    def field_name(self) -> str:
        return _FIELDS[self]

    def validate(self, value: Any) -> Any:
        """Return ``value`` unchanged if it fits this slot."""

        if value is None:
            return value
        if self is EditorSlot.LAST_COLUMN:
            if isinstance(value, bool) or not isinstance(value, int):
                raise SlotTypeError(self, value, "expects an int")
            if value < 0:
                raise SlotTypeError(self, value, "expects a non-negative column")
            return value
        expected: Optional[Tuple[Type[Any], ...]] = _TYPES.get(self)
        if expected and not isinstance(value, expected):
            names = "/".join(kind.__name__ for kind in expected)
            raise SlotTypeError(self, value, f"expects {names}")
        return value


_FIELDS = {
    EditorSlot.LAST_COLUMN: "last_column",
    EditorSlot.PROJECT: "project",
    EditorSlot.VIRTUAL_FILE: "virtual_file",
    EditorSlot.LAST_VISUAL: "last_visual",
    EditorSlot.LAST_VISUAL_OP: "last_visual_op",
}

# Project and file handles are opaque host objects.
_TYPES = {
    EditorSlot.LAST_VISUAL: (VisualRange,),
    EditorSlot.LAST_VISUAL_OP: (VisualChange,),
}


@dataclass(slots=True)
class EditorAttributes:
    """Side data the extension keeps for one live editor."""

    last_column: Optional[int] = None
    project: Any = None
    virtual_file: Any = None
    last_visual: Optional[VisualRange] = None
    last_visual_op: Optional[VisualChange] = None

    def get(self, slot: EditorSlot | str) -> Any:
        return getattr(self, EditorSlot.parse(slot).field_name)

    def set(self, slot: EditorSlot | str, value: Any) -> None:
        parsed = EditorSlot.parse(slot)
        setattr(self, parsed.field_name, parsed.validate(value))


__all__ = ["EditorAttributes", "EditorSlot", "SlotTypeError", "UnknownSlotError"]
