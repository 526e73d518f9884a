"""Wall-clock accounting for a single request."""
from __future__ import annotations

import time
from typing import Callable, Optional


class TimeBudget:
    """Track elapsed time against a fixed allowance using a monotonic clock."""

    def __init__(
        self,
        total_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        started_at: Optional[float] = None,
    ) -> None:
        self.total_seconds = total_seconds
        self._clock = clock
        self.started_at = clock() if started_at is None else started_at

    def elapsed(self) -> float:
        return self._clock() - self.started_at

    def remaining(self) -> float:
        return self.total_seconds - self.elapsed()
