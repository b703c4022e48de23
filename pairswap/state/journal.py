"""All-or-nothing execution of exchange operations.

A pool operation touches several pieces of state: the pool's reserves, its
liquidity ledger, two asset ledgers and the event logs. Each of them
implements the Snapshottable protocol; ``atomic`` captures all of them
before the operation runs and restores every one if it raises.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol, runtime_checkable

import structlog

logger = structlog.get_logger()


@runtime_checkable
class Snapshottable(Protocol):
    """State that can be captured and later put back exactly."""

    def snapshot(self) -> Any:
        """Capture the current state as an opaque value."""
        ...

    def restore(self, snapshot: Any) -> None:
        """Put back state previously captured by snapshot()."""
        ...


@contextmanager
def atomic(*participants: Snapshottable, operation: str = "operation") -> Iterator[None]:
    """Run the body as one atomic unit across all participants.

    Participants listed more than once are captured once.

    Args:
        *participants: State touched by the operation
        operation: Name used in the rollback log line

    Raises:
        Whatever the body raises, after every participant is restored
    """
    seen: set[int] = set()
    captured: list[tuple[Snapshottable, Any]] = []
    for participant in participants:
        if id(participant) in seen:
            continue
        seen.add(id(participant))
        captured.append((participant, participant.snapshot()))

    try:
        yield
    except BaseException as exc:
        for participant, snapshot in reversed(captured):
            participant.restore(snapshot)
        logger.debug(
            "operation_rolled_back",
            operation=operation,
            error=type(exc).__name__,
            participants=len(captured),
        )
        raise
