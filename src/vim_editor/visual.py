"""Value types produced by Visual mode commands and remembered per editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column)


class SelectionType(str, Enum):
    CHARACTER = "character"
    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class VisualRange:
    """A completed Visual mode selection.

    ``offset`` is the column of the cursor relative to the selection start,
    needed to restore the cursor side when the selection is reselected.
    """

    start: Cursor
    end: Cursor
    type: SelectionType = SelectionType.CHARACTER
    offset: int = 0


@dataclass(frozen=True, slots=True)
class VisualChange:
    """Extent of the last operator applied over a Visual selection."""

    lines: int
    columns: int
    type: SelectionType = SelectionType.CHARACTER


__all__ = ["Cursor", "SelectionType", "VisualRange", "VisualChange"]
