from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

@dataclass(frozen=True)
class StatSample:
    duration_us: int          # processing time of one lookup, microseconds
    observed_at: datetime     # naive, server-local

@dataclass(frozen=True)
class Statistics:
    total_words: int
    total_requests: int
    avg_processing_time_us: int

    def to_json(self) -> dict:
        # wire names kept from the v1 API; the average is in microseconds
        return {
            "totalWords": self.total_words,
            "totalRequests": self.total_requests,
            "avgProcessingTimeMs": self.avg_processing_time_us,
        }
