from __future__ import annotations

import gc
from dataclasses import dataclass

import pytest

from vim_editor.data import (
    EditorAttributes,
    EditorDataStore,
    EditorSlot,
    SlotTypeError,
    UnknownSlotError,
)
from vim_editor.host import MemoryDocument, MemoryEditor
from vim_editor.visual import SelectionType, VisualChange, VisualRange


def make_editor(text: str = "hello") -> MemoryEditor:
    return MemoryEditor(document=MemoryDocument(text=text))


def test_untouched_editor_reads_none_without_creating_record() -> None:
    store = EditorDataStore()
    editor = make_editor()

    assert store.get(editor, EditorSlot.LAST_VISUAL) is None
    assert store.peek(editor) is None
    assert editor not in store


def test_record_created_lazily_on_first_write() -> None:
    store = EditorDataStore()
    editor = make_editor()

    store.set(editor, EditorSlot.LAST_COLUMN, 3)

    record = store.peek(editor)
    assert isinstance(record, EditorAttributes)
    assert record.last_column == 3
    assert len(store) == 1


def test_slots_accept_original_string_names() -> None:
    store = EditorDataStore()
    editor = make_editor()
    change = VisualChange(lines=2, columns=0, type=SelectionType.LINE)

    store.set(editor, "lastVisualOp", change)

    assert store.get(editor, EditorSlot.LAST_VISUAL_OP) == change
    assert store.get(editor, "lastVisualOp") == change


def test_unknown_slot_name_is_rejected() -> None:
    store = EditorDataStore()
    editor = make_editor()

    with pytest.raises(UnknownSlotError):
        store.get(editor, "lastSearch")
    with pytest.raises(UnknownSlotError):
        store.set(editor, "lastSearch", 1)


@pytest.mark.parametrize(
    ("slot", "value"),
    [
        (EditorSlot.LAST_COLUMN, "4"),
        (EditorSlot.LAST_COLUMN, True),
        (EditorSlot.LAST_COLUMN, -1),
        (EditorSlot.LAST_VISUAL, VisualChange(lines=1, columns=1)),
        (EditorSlot.LAST_VISUAL_OP, VisualRange(start=(0, 0), end=(0, 1))),
    ],
)
def test_wrong_value_type_raises(slot: EditorSlot, value: object) -> None:
    store = EditorDataStore()

    with pytest.raises(SlotTypeError):
        store.set(make_editor(), slot, value)


def test_project_and_file_slots_hold_any_handle() -> None:
    store = EditorDataStore()
    editor = make_editor()
    project = object()

    store.set(editor, EditorSlot.PROJECT, project)
    store.set(editor, EditorSlot.VIRTUAL_FILE, "/tmp/a.txt")

    assert store.get(editor, EditorSlot.PROJECT) is project
    assert store.get(editor, EditorSlot.VIRTUAL_FILE) == "/tmp/a.txt"


def test_set_overwrites_and_none_clears() -> None:
    store = EditorDataStore()
    editor = make_editor()

    store.set(editor, EditorSlot.LAST_COLUMN, 1)
    store.set(editor, EditorSlot.LAST_COLUMN, 7)
    assert store.get(editor, EditorSlot.LAST_COLUMN) == 7

    store.set(editor, EditorSlot.LAST_COLUMN, None)
    assert store.get(editor, EditorSlot.LAST_COLUMN) is None


def test_records_are_independent_per_editor() -> None:
    store = EditorDataStore()
    first = make_editor()
    second = make_editor()

    store.set(first, EditorSlot.LAST_COLUMN, 5)

    assert store.get(second, EditorSlot.LAST_COLUMN) is None
    assert store.peek(second) is None


def test_editors_sharing_a_document_keep_separate_records() -> None:
    store = EditorDataStore()
    document = MemoryDocument(text="shared")
    left = MemoryEditor(document=document)
    right = MemoryEditor(document=document)

    store.set(left, EditorSlot.LAST_COLUMN, 2)
    store.set(right, EditorSlot.LAST_COLUMN, 4)

    assert store.get(left, EditorSlot.LAST_COLUMN) == 2
    assert store.get(right, EditorSlot.LAST_COLUMN) == 4


def test_record_released_with_editor() -> None:
    store = EditorDataStore()
    editor = make_editor()
    store.set(editor, EditorSlot.LAST_COLUMN, 1)
    assert len(store) == 1

    del editor
    gc.collect()

    assert len(store) == 0


def test_discard_drops_record() -> None:
    store = EditorDataStore()
    editor = make_editor()
    store.set(editor, EditorSlot.LAST_COLUMN, 1)

    store.discard(editor)
    store.discard(editor)

    assert editor not in store


class SlottedEditor:
    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name


@dataclass
class UnhashableEditor:
    name: str


@dataclass(frozen=True)
class ValueEditor:
    name: str


def test_slotted_editor_without_weakref_support() -> None:
    store = EditorDataStore()
    editor = SlottedEditor("slots")

    assert store.get(editor, EditorSlot.LAST_COLUMN) is None
    store.set(editor, EditorSlot.LAST_COLUMN, 2)

    assert store.get(editor, EditorSlot.LAST_COLUMN) == 2
    assert editor in store


def test_unhashable_editor_is_accepted() -> None:
    store = EditorDataStore()
    editor = UnhashableEditor("plain")

    store.set(editor, EditorSlot.LAST_VISUAL, VisualRange(start=(0, 0), end=(0, 2)))

    assert store.get(editor, EditorSlot.LAST_VISUAL) == VisualRange((0, 0), (0, 2))


def test_equal_but_distinct_editors_keep_separate_records() -> None:
    store = EditorDataStore()
    first = ValueEditor("e")
    second = ValueEditor("e")
    assert first == second

    store.set(first, EditorSlot.LAST_COLUMN, 5)

    assert store.get(second, EditorSlot.LAST_COLUMN) is None
    assert second not in store


def test_non_weakref_editor_is_held_until_discarded() -> None:
    store = EditorDataStore()
    store.set(SlottedEditor("pinned"), EditorSlot.LAST_COLUMN, 1)
    gc.collect()
    assert len(store) == 1

    editor = SlottedEditor("kept")
    store.set(editor, EditorSlot.LAST_COLUMN, 1)
    store.discard(editor)

    assert len(store) == 1
    assert editor not in store


def test_discard_then_collect_does_not_disturb_new_records() -> None:
    store = EditorDataStore()
    editor = make_editor()
    store.set(editor, EditorSlot.LAST_COLUMN, 1)
    store.discard(editor)
    other = make_editor()
    store.set(other, EditorSlot.LAST_COLUMN, 2)

    del editor
    gc.collect()

    assert store.get(other, EditorSlot.LAST_COLUMN) == 2
