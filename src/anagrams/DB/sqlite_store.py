# anagrams/DB/sqlite_store.py
from __future__ import annotations
import json
import os
from datetime import datetime
from typing import List, Mapping, Optional, Sequence

from .api import AnagramStore
from .pool import ConnectionPool
from .. import config as CFG
from ..models import StatSample

_SCHEMA = """
CREATE TABLE IF NOT EXISTS words (
  key TEXT PRIMARY KEY,
  words_list TEXT NOT NULL          -- JSON array, insertion order
);
CREATE TABLE IF NOT EXISTS stats (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  request_duration INTEGER NOT NULL CHECK (request_duration >= 0),
  timestamp TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS stats_timestamp ON stats(timestamp);
"""

# single statement: creates the bucket or appends to it, so concurrent inserts cannot lose updates
_APPEND = (
    "INSERT INTO words(key, words_list) VALUES (?, json_array(?)) "
    "ON CONFLICT(key) DO UPDATE SET words_list = json_insert(words.words_list, '$[#]', ?)"
)
_REPLACE = (
    "INSERT INTO words(key, words_list) VALUES (?, ?) "
    "ON CONFLICT(key) DO UPDATE SET words_list = excluded.words_list"
)


def to_store_ts(ts: datetime) -> str:
    """Naive local time, fixed-width text so that string comparison matches time order."""
    if ts.tzinfo is not None:
        ts = ts.astimezone().replace(tzinfo=None)
    return ts.strftime(CFG.STORE_TS_FORMAT)


def from_store_ts(raw: str) -> datetime:
    return datetime.strptime(raw, CFG.STORE_TS_FORMAT)


class SQLiteStore(AnagramStore):
    """Words and stats tables in one SQLite file, accessed through a connection pool."""
    def __init__(self, db_path: str, *, pool_size: int = CFG.POOL_SIZE) -> None:
        self.db_path = os.path.abspath(db_path)
        os.makedirs(os.path.dirname(self.db_path) or ".", exist_ok=True)
        self.pool = ConnectionPool(self.db_path, size=pool_size)
        with self.pool.connection("creating tables") as conn:
            conn.executescript(_SCHEMA)

    # ---- words: read ----
    def has_key(self, key: str) -> bool:
        with self.pool.connection("finding key in words table") as conn:
            row = conn.execute("SELECT EXISTS (SELECT 1 FROM words WHERE key = ?)", (key,)).fetchone()
        return bool(row[0])

    def has_word(self, key: str, word: str) -> bool:
        with self.pool.connection("finding word in words table") as conn:
            row = conn.execute(
                "SELECT EXISTS (SELECT 1 FROM words, json_each(words.words_list) "
                "WHERE words.key = ? AND json_each.value = ?)",
                (key, word),
            ).fetchone()
        return bool(row[0])

    def get_words(self, key: str) -> Optional[List[str]]:
        with self.pool.connection("retrieving word list for key") as conn:
            row = conn.execute("SELECT words_list FROM words WHERE key = ?", (key,)).fetchone()
        return None if row is None else json.loads(row[0])

    def count_words(self) -> int:
        with self.pool.connection("getting dictionary size") as conn:
            row = conn.execute(
                "SELECT COALESCE(SUM(json_array_length(words_list)), 0) FROM words"
            ).fetchone()
        return int(row[0])

    # ---- words: write ----
    def append_word(self, key: str, word: str) -> None:
        with self.pool.connection("adding word to words table") as conn:
            with conn:
                conn.execute(_APPEND, (key, word, word))

    def replace_buckets(self, buckets: Mapping[str, Sequence[str]]) -> int:
        rows = [(k, json.dumps(list(ws))) for k, ws in buckets.items()]
        with self.pool.connection("adding words to keys in table") as conn:
            with conn:                      # commit on success, rollback of the whole batch on error
                conn.executemany(_REPLACE, rows)
        return len(rows)

    # ---- stats ----
    def add_sample(self, duration_us: int, observed_at: datetime) -> None:
        with self.pool.connection("adding statistic") as conn:
            with conn:
                conn.execute(
                    "INSERT INTO stats(request_duration, timestamp) VALUES (?, ?)",
                    (int(duration_us), to_store_ts(observed_at)),
                )

    def samples(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[StatSample]:
        sql, vals = "SELECT request_duration, timestamp FROM stats", []
        if start is not None and end is not None:
            sql += " WHERE timestamp >= ? AND timestamp <= ?"
            vals = [to_store_ts(start), to_store_ts(end)]
        sql += " ORDER BY id"
        with self.pool.connection("retrieving statistics") as conn:
            rows = conn.execute(sql, vals).fetchall()
        return [StatSample(int(d), from_store_ts(ts)) for d, ts in rows]

    # ---- lifecycle ----
    def close(self) -> None:
        self.pool.close()
