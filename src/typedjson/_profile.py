"""
Hot path profiling for the lexer, the parsers and the binder.

Set TYPEDJSON_PROFILE in the environment to record per-stage call counts,
time and input sizes. Without it (or under ``python -O``) ProfileContext is
a no-op and the accessors report nothing.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "TYPEDJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings for one named parsing stage."""

    stage: str
    call_count: int = 0
    total_time_ns: int = 0
    units_processed: int = 0

    def record_call(self, duration_ns: int, units: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.units_processed += units

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0


def format_hot_path_stats(stats: dict[str, HotPathStats]) -> str:
    """Renders stats as a table, slowest stage first."""
    rows = sorted(stats.values(), key=lambda s: s.total_time_ns, reverse=True)
    lines = [f"{'stage':<20} {'calls':>8} {'total ms':>10} {'mean us':>10}"]
    for s in rows:
        lines.append(
            f"{s.stage:<20} {s.call_count:>8} "
            f"{s.total_time_ns / 1e6:>10.3f} {s.mean_time_ns / 1e3:>10.3f}"
        )
    return "\n".join(lines)


if PROFILE_HOT_PATHS:
    _registry: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Times the enclosed block under ``stage``."""

        def __init__(self, stage: str, units: int = 0):
            self.stage = stage
            self.units = units
            self._started = 0

        def __enter__(self) -> "ProfileContext":
            self._started = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            elapsed = time.perf_counter_ns() - self._started
            stats = _registry.get(self.stage)
            if stats is None:
                stats = _registry[self.stage] = HotPathStats(self.stage)
            stats.record_call(elapsed, self.units)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Snapshot of the stats recorded since the last clear."""
        return dict(_registry)

    def clear_hot_path_stats() -> None:
        _registry.clear()

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, stage: str, units: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass
