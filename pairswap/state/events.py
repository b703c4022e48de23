"""In-process event log.

Pools and registries append their emitted events here, in order. The log
takes part in atomic operations, so a failed call leaves no events behind.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from pydantic import BaseModel

E = TypeVar("E", bound=BaseModel)


class EventLog:
    """Append-only list of emitted events."""

    def __init__(self) -> None:
        self._events: list[BaseModel] = []

    def emit(self, event: BaseModel) -> None:
        self._events.append(event)

    def of_type(self, event_type: type[E]) -> list[E]:
        """All events of one type, oldest first."""
        return [e for e in self._events if isinstance(e, event_type)]

    def last(self, event_type: type[E] | None = None) -> BaseModel | None:
        """Most recent event, optionally restricted to one type."""
        for event in reversed(self._events):
            if event_type is None or isinstance(event, event_type):
                return event
        return None

    def snapshot(self) -> int:
        return len(self._events)

    def restore(self, snapshot: int) -> None:
        del self._events[snapshot:]

    def __iter__(self) -> Iterator[BaseModel]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
