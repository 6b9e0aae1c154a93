"""Commands shared by normal and command mode."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .bookmark import UriQueue


class QueueAction(enum.IntEnum):
    PUSH = 0
    UNSHIFT = 1
    POP = 2
    CLEAR = 3


@dataclass(frozen=True)
class QueueResult:
    """Outcome of a queue command; uri is the entry taken by a pop."""

    success: bool
    message: str | None = None
    uri: str | None = None


def run_queue_command(
    queue: UriQueue,
    action: QueueAction,
    uri: str | None = None,
    current_uri: str | None = None,
) -> QueueResult:
    """Run a queue command; push and unshift fall back to current_uri."""
    action = QueueAction(action)

    if action is QueueAction.POP:
        popped, count = queue.pop()
        return QueueResult(popped is not None, f"Queue length {count}", popped)

    if action is QueueAction.CLEAR:
        try:
            queue.clear()
        except OSError:
            return QueueResult(False)
        # Clearing reports its message but does not count as a success.
        return QueueResult(False, "Queue cleared")

    target = uri if uri else current_uri
    if not target:
        raise ValueError("no URI to queue")
    try:
        if action is QueueAction.PUSH:
            queue.push(target)
        else:
            queue.unshift(target)
    except OSError:
        return QueueResult(False)
    return QueueResult(True, "Pushed to queue")