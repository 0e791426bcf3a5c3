# anagrams/DB/api.py
from __future__ import annotations
from datetime import datetime
from typing import List, Mapping, Optional, Protocol, Sequence

from ..models import StatSample


class WordStore(Protocol):
    """Buckets of words keyed by canonical key."""
    # Read
    def has_key(self, key: str) -> bool: ...
    def has_word(self, key: str, word: str) -> bool: ...
    def get_words(self, key: str) -> Optional[List[str]]: ...   # None when no bucket exists
    def count_words(self) -> int: ...
    # Write
    def append_word(self, key: str, word: str) -> None: ...     # atomic create-or-append
    def replace_buckets(self, buckets: Mapping[str, Sequence[str]]) -> int: ...  # one all-or-nothing batch


class StatStore(Protocol):
    """Append-only (duration, timestamp) samples."""
    def add_sample(self, duration_us: int, observed_at: datetime) -> None: ...
    def samples(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[StatSample]: ...


class AnagramStore(WordStore, StatStore, Protocol):
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str) -> AnagramStore:
    """
    Factory:
      - sqlite:///path -> SQLiteStore (file and tables are created if missing)
      - memory://      -> MemoryStore (process-local, for tests and ephemeral runs)
    """
    if dsn.startswith("sqlite:///"):
        from .sqlite_store import SQLiteStore     # lazy: sqlite_store imports this module
        return SQLiteStore(dsn.removeprefix("sqlite:///"))

    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore()

    raise ValueError(f"Unsupported store DSN: {dsn}")
