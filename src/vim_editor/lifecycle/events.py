"""Tagged editor lifecycle events and their ordered dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from vim_editor.runtime.telemetry import record_event, span


class EditorEventKind(str, Enum):
    OPENED = "opened"
    CLOSED = "closed"


@dataclass(frozen=True, slots=True)
class EditorEvent:
    kind: EditorEventKind
    editor: Any


LifecycleListener = Callable[[EditorEvent], None]


class LifecycleDispatcher:
    """Delivers lifecycle events to named listeners in registration order."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._listeners: Dict[str, LifecycleListener] = {}
        self._logger_name = logger_name

    def register(self, name: str, listener: LifecycleListener) -> LifecycleListener:
        if name in self._listeners:
            raise ValueError(f"Lifecycle listener '{name}' already registered")
        self._listeners[name] = listener
        record_event(
            "lifecycle.listener.registered",
            level="debug",
            data={"listener": name},
            logger_name=self._logger_name,
        )
        return listener

    def unregister(self, name: str) -> Optional[LifecycleListener]:
        return self._listeners.pop(name, None)

    def listener_names(self) -> tuple[str, ...]:
        return tuple(self._listeners)

    def dispatch(self, event: EditorEvent) -> None:
        with span(
            f"lifecycle::{event.kind.value}",
            logger_name=self._logger_name,
            component="lifecycle",
            metadata={"listeners": len(self._listeners)},
        ):
            for listener in list(self._listeners.values()):
                listener(event)
        record_event(
            f"editor.{event.kind.value}",
            data={"editor": type(event.editor).__name__},
            logger_name=self._logger_name,
        )


__all__ = [
    "EditorEvent",
    "EditorEventKind",
    "LifecycleDispatcher",
    "LifecycleListener",
]
