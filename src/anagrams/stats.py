from __future__ import annotations
import logging
import time
from datetime import datetime
from typing import Callable, Optional

from .DB.api import StatStore
from .errors import ValidationError
from .validate import INVALID_RANGE
from .models import Statistics

log = logging.getLogger(__name__)


def elapsed_microseconds(start: float) -> int:
    """Microseconds since ``start`` (a time.perf_counter() reading)."""
    return int((time.perf_counter() - start) * 1_000_000)


class StatisticsAggregator:
    """Records one timing sample per lookup and summarizes them over an optional window."""

    def __init__(self, store: StatStore, word_count: Callable[[], int]) -> None:
        self._store = store
        self._word_count = word_count

    def record(self, duration_us: int, observed_at: datetime) -> None:
        if duration_us < 0:
            raise ValueError(f"duration must be non-negative, got {duration_us}")
        self._store.add_sample(duration_us, observed_at)

    def aggregate(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> Statistics:
        """
        No bounds -> every sample; both bounds -> samples with start <= observed_at <= end.
        The average is truncated to whole microseconds and is 0 when nothing matched.
        """
        if (start is None) != (end is None):
            raise ValidationError(INVALID_RANGE)

        samples = self._store.samples(start, end)
        total_requests = len(samples)
        total_duration = sum(s.duration_us for s in samples)
        avg = total_duration // total_requests if total_requests else 0

        stats = Statistics(
            total_words=self._word_count(),
            total_requests=total_requests,
            avg_processing_time_us=avg,
        )
        log.debug("Aggregated %s for window [%s, %s]", stats, start, end)
        return stats
