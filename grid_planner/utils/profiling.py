"""cProfile helpers for measuring planner performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
from typing import Any, Callable
import time

from .observer import record_plan


def profile_plans(
    n: int,
    plan_callback: Callable[[], Any],
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Profile ``plan_callback`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of iterations to profile.
    plan_callback:
        Function running one search per call.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        began = time.perf_counter()
        plan_callback()
        record_plan(time.perf_counter() - began)
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_plans"]
