"""Per-collector scrape bookkeeping."""

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class StateSnapshot:
    """Point-in-time copy of a collector's bookkeeping values."""

    up: float
    total_scrapes: float
    json_parse_failures: float


class CollectorState:
    """Thread-safe up indicator and failure counters of one collector.

    The counters are monotonic for the lifetime of the owning collector.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._up = 0.0
        self._total_scrapes = 0.0
        self._json_parse_failures = 0.0

    def record_scrape(self) -> None:
        """Count the start of a scrape cycle."""
        with self._lock:
            self._total_scrapes += 1

    def record_parse_failure(self) -> None:
        with self._lock:
            self._json_parse_failures += 1

    def mark_up(self) -> None:
        with self._lock:
            self._up = 1.0

    def mark_down(self) -> None:
        with self._lock:
            self._up = 0.0

    def snapshot(self) -> StateSnapshot:
        """Return a consistent copy of all three values."""
        with self._lock:
            return StateSnapshot(
                up=self._up,
                total_scrapes=self._total_scrapes,
                json_parse_failures=self._json_parse_failures,
            )
