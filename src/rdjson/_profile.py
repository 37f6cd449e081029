"""
Opt-in timing of parser productions, enabled with ``RDJSON_PROFILE``.

Each profiled production records its wall time and the number of document
bytes it consumed, taken as the cursor offset delta between entry and exit.
Nested productions are counted in full by every enclosing production.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

from ._cursor import Cursor

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "RDJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings for one parser production."""

    production: str
    call_count: int = 0
    failure_count: int = 0
    total_time_ns: int = 0
    bytes_consumed: int = 0

    def record_call(
        self, duration_ns: int, nbytes: int = 0, failed: bool = False
    ) -> None:
        """Adds one run of the production."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.bytes_consumed += nbytes
        if failed:
            self.failure_count += 1

    @property
    def mean_time_ns(self) -> float:
        if not self.call_count:
            return 0.0
        return self.total_time_ns / self.call_count

    @property
    def ns_per_byte(self) -> float:
        """Time spent per consumed byte; zero until a byte was consumed."""
        if not self.bytes_consumed:
            return 0.0
        return self.total_time_ns / self.bytes_consumed


def format_hot_path_stats(stats: dict[str, HotPathStats]) -> str:
    """Renders statistics as a table, slowest production first."""
    lines = [
        f"{'production':<16}{'calls':>10}{'failed':>8}"
        f"{'bytes':>12}{'total ms':>12}{'ns/byte':>10}"
    ]
    ordered = sorted(
        stats.values(), key=lambda s: s.total_time_ns, reverse=True
    )
    for s in ordered:
        lines.append(
            f"{s.production:<16}{s.call_count:>10}{s.failure_count:>8}"
            f"{s.bytes_consumed:>12}{s.total_time_ns / 1e6:>12.3f}"
            f"{s.ns_per_byte:>10.1f}"
        )
    return "\n".join(lines)


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Times one run of a production and measures the bytes it read."""

        def __init__(self, production: str, cursor: Cursor):
            self.production = production
            self.cursor = cursor
            self.start_time = 0
            self.start_pos = 0

        def __enter__(self) -> "ProfileContext":
            self.start_pos = self.cursor.pos
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            stats = _hot_path_stats.get(self.production)
            if stats is None:
                stats = _hot_path_stats[self.production] = HotPathStats(
                    self.production
                )
            stats.record_call(
                duration,
                self.cursor.pos - self.start_pos,
                failed=exc_type is not None,
            )

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - arguments are ignored
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, production: str, cursor: Cursor) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass
