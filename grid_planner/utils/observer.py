"""Runtime observability helpers for planner runs."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import asdict, dataclass
from typing import Any, Deque, Dict, List


logger = logging.getLogger(__name__)

# Rolling history of the last 1000 plan durations in seconds
_PLAN_HISTORY_LEN = 1000
_plan_durations: Deque[float] = deque(maxlen=_PLAN_HISTORY_LEN)

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


@dataclass
class SearchStats:
    """Counters collected during a single ``plan`` call."""

    expanded: int = 0
    pushed: int = 0
    found: bool = False
    path_length: int = 0
    duration: float = 0.0
    budget_exhausted: bool = False


def record_plan(duration: float) -> None:
    """Append a plan ``duration`` in seconds to the rolling history."""

    _plan_durations.append(duration)


def average_plan_time() -> float | None:
    """Return the mean recorded plan duration, or ``None`` if none recorded."""

    if not _plan_durations:
        return None
    return sum(_plan_durations) / len(_plan_durations)


def print_summary() -> None:
    """Print the average plan time based on recorded durations."""

    avg = average_plan_time()
    if avg is None:
        print("Plans: --")
        return
    print(f"{len(_plan_durations)} plans (avg {avg * 1000:.2f} ms)")


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


def record_search(
    stats: SearchStats, log: List[Dict[str, Any]] | None = None
) -> None:
    """Record ``stats`` from a finished search as a ``"search"`` event."""

    record_plan(stats.duration)
    log_event("search", asdict(stats), log)
    logger.debug(
        "search: found=%s expanded=%d pushed=%d path_length=%d",
        stats.found,
        stats.expanded,
        stats.pushed,
        stats.path_length,
    )


__all__ = [
    "SearchStats",
    "average_plan_time",
    "log_event",
    "print_summary",
    "record_plan",
    "record_search",
    "_plan_durations",
    "_events",
]
