"""Reverse lookup of the project and file an editor belongs to."""

from __future__ import annotations

from typing import Any, Callable, Optional

from vim_editor.host.protocols import EditorHost, TextFileEditor
from vim_editor.runtime.telemetry import record_event, span

from .slots import EditorSlot
from .store import EditorDataStore

# Picks the value to remember from a (project, file) match.
_Pick = Callable[[Any, Any], Any]


class ProjectFileResolver:
    """Finds an editor's owning project/file by scanning open editors.

    A hit is written back into the store so each editor is scanned at most
    once per slot. Misses are not remembered; the next call scans again.
    """

    def __init__(
        self,
        host: EditorHost,
        store: EditorDataStore,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.host = host
        self.store = store
        self._logger_name = logger_name
        self.scan_count = 0

    def resolve_project(self, editor: Any) -> Any:
        return self._resolve(editor, EditorSlot.PROJECT, lambda project, _: project)

    def resolve_file(self, editor: Any) -> Any:
        return self._resolve(editor, EditorSlot.VIRTUAL_FILE, lambda _, file: file)

    def _resolve(self, editor: Any, slot: EditorSlot, pick: _Pick) -> Any:
        cached = self.store.get(editor, slot)
        if cached is not None:
            return cached

        with span(
            f"resolver::{slot.value}",
            logger_name=self._logger_name,
            component="resolver",
        ) as handle:
            found = self._scan(editor, pick)
            handle.add_metadata("found", found is not None)

        if found is None:
            record_event(
                "resolver.miss",
                level="debug",
                data={"slot": slot.value},
                logger_name=self._logger_name,
            )
            return None
        self.store.set(editor, slot, found)
        record_event(
            "resolver.hit",
            level="debug",
            data={"slot": slot.value, "value": found},
            logger_name=self._logger_name,
        )
        return found

    def _scan(self, editor: Any, pick: _Pick) -> Optional[Any]:
        self.scan_count += 1
        found = None
        # Only the per-file loop stops early, so a later file or project
        # that also shows this editor overrides an earlier match.
        for project in self.host.list_open_projects():
            for file in self.host.list_open_files(project):
                for candidate in self.host.list_editors_for(project, file):
                    if _shows(candidate, editor):
                        found = pick(project, file)
                        break
        return found


def _shows(candidate: Any, editor: Any) -> bool:
    if not isinstance(candidate, TextFileEditor):
        return False
    return candidate.text_editor == editor


__all__ = ["ProjectFileResolver"]
