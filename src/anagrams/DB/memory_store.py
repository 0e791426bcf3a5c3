# anagrams/DB/memory_store.py
from __future__ import annotations
import threading
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Sequence

from .api import AnagramStore
from ..models import StatSample


def _naive_local(ts: datetime) -> datetime:
    if ts.tzinfo is not None:
        return ts.astimezone().replace(tzinfo=None)
    return ts


class MemoryStore(AnagramStore):
    """Simple in-memory store (useful for tests or ephemeral runs). One lock makes every write atomic."""
    def __init__(self) -> None:
        self._buckets: Dict[str, List[str]] = {}
        self._samples: List[StatSample] = []
        self._lock = threading.Lock()

    # R
    def has_key(self, key: str) -> bool:
        return key in self._buckets

    def has_word(self, key: str, word: str) -> bool:
        with self._lock:
            return word in self._buckets.get(key, ())

    def get_words(self, key: str) -> Optional[List[str]]:
        with self._lock:
            bucket = self._buckets.get(key)
            return None if bucket is None else list(bucket)

    def count_words(self) -> int:
        with self._lock:
            return sum(len(b) for b in self._buckets.values())

    # W
    def append_word(self, key: str, word: str) -> None:
        with self._lock:
            self._buckets.setdefault(key, []).append(word)

    def replace_buckets(self, buckets: Mapping[str, Sequence[str]]) -> int:
        staged = {k: list(ws) for k, ws in buckets.items()}   # materialize first: a bad item leaves nothing applied
        with self._lock:
            self._buckets.update(staged)
        return len(staged)

    # stats
    def add_sample(self, duration_us: int, observed_at: datetime) -> None:
        sample = StatSample(int(duration_us), _naive_local(observed_at))
        with self._lock:
            self._samples.append(sample)

    def samples(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[StatSample]:
        with self._lock:
            rows = list(self._samples)
        if start is None or end is None:
            return rows
        lo, hi = _naive_local(start), _naive_local(end)
        return [s for s in rows if lo <= s.observed_at <= hi]

    def close(self) -> None:
        with self._lock:
            self._buckets.clear()
            self._samples.clear()
