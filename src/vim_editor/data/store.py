"""Editor-scoped attribute store.

Records are attached to editor objects by identity, the way a host's
per-object user data would be. A record lives as long as its editor, and
nothing here has to be told when the host throws an editor away.
"""

from __future__ import annotations

from typing import Any, Optional

from .identity import IdentityMap
from .slots import EditorAttributes, EditorSlot


class EditorDataStore:
    """Maps each live editor to its ``EditorAttributes`` record."""

    def __init__(self) -> None:
        self._records: IdentityMap[EditorAttributes] = IdentityMap()

    def attributes(self, editor: Any) -> EditorAttributes:
        """Return the record for ``editor``, creating it on first access."""

        record = self._records.get(editor)
        if record is None:
            record = self._records.put(editor, EditorAttributes())
        return record

    def peek(self, editor: Any) -> Optional[EditorAttributes]:
        return self._records.get(editor)

    def get(self, editor: Any, slot: EditorSlot | str) -> Any:
        record = self._records.get(editor)
        if record is None:
            # Still reject unknown slot names for untouched editors.
            EditorSlot.parse(slot)
            return None
        return record.get(slot)

    def set(self, editor: Any, slot: EditorSlot | str, value: Any) -> None:
        self.attributes(editor).set(slot, value)

    def discard(self, editor: Any) -> None:
        self._records.pop(editor)

    def __contains__(self, editor: object) -> bool:
        return editor in self._records

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["EditorDataStore"]
