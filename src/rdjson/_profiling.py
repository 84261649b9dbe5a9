"""Hot-path timing, enabled with the RDJSON_PROFILE environment variable."""

import time
from dataclasses import dataclass
from typing import Any

from ._config import PROFILE_HOT_PATHS


@dataclass
class HotPathStats:
    """Call count and cumulative time for one parser production."""

    production: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_consumed: int = 0

    def record(self, duration_ns: int, chars: int) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_consumed += chars

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0


_hot_path_stats: dict[str, HotPathStats] = {}


if PROFILE_HOT_PATHS:

    class ProfileContext:
        """
        Times one production and credits it with the characters it consumed.

        The cursor is sampled on entry and exit, so nested productions are
        counted inclusively, the way a flat profiler would.
        """

        def __init__(self, production: str, cursor: Any = None) -> None:
            self.production = production
            self.cursor = cursor
            self.start_time = 0
            self.start_pos = 0

        def __enter__(self) -> "ProfileContext":
            self.start_pos = self.cursor.pos if self.cursor is not None else 0
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            chars = self.cursor.pos - self.start_pos if self.cursor else 0
            stats = _hot_path_stats.get(self.production)
            if stats is None:
                stats = _hot_path_stats[self.production] = HotPathStats(
                    self.production
                )
            stats.record(duration, chars)

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, production: str, cursor: Any = None) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the profiling statistics."""
    return dict(_hot_path_stats)


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()


def format_hot_path_stats() -> str:
    """Renders the statistics as a table, slowest production first."""
    rows = sorted(
        _hot_path_stats.values(), key=lambda s: s.total_time_ns, reverse=True
    )
    lines = [f"{'production':<16}{'calls':>10}{'total ms':>12}{'chars':>10}"]
    for stats in rows:
        lines.append(
            f"{stats.production:<16}{stats.call_count:>10}"
            f"{stats.total_time_ns / 1e6:>12.3f}{stats.chars_consumed:>10}"
        )
    return "\n".join(lines)
