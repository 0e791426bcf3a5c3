# anagrams/DB/pool.py
from __future__ import annotations
import logging
import queue
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from .. import config as CFG
from ..errors import StorageError

log = logging.getLogger(__name__)


class ConnectionPool:
    """
    Fixed-size pool of SQLite connections shared by all request threads.

    ``connection(op)`` hands out one connection for the duration of a ``with`` block
    and always puts it back. Any ``sqlite3.Error`` raised inside the block is
    re-raised as StorageError with the sqlite3 exception attached.
    """

    def __init__(self, db_path: str, *, size: int = CFG.POOL_SIZE,
                 timeout: float = CFG.POOL_TIMEOUT, db_timeout: float = CFG.DB_TIMEOUT) -> None:
        if size < 1:
            raise ValueError("pool size must be >= 1")
        self.db_path = db_path
        self.timeout = timeout
        self._db_timeout = db_timeout
        self._idle: queue.LifoQueue[sqlite3.Connection] = queue.LifoQueue(maxsize=size)
        self._all: list[sqlite3.Connection] = []
        for _ in range(size):
            conn = self._connect()
            self._all.append(conn)
            self._idle.put(conn)
        log.info("Opened %d SQLite connections to %s", size, db_path)

    def _connect(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self.db_path, timeout=self._db_timeout, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StorageError(f"Could not open database {self.db_path}", exc) from exc
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    @contextmanager
    def connection(self, op: str = "storage operation") -> Iterator[sqlite3.Connection]:
        try:
            conn = self._idle.get(timeout=self.timeout)
        except queue.Empty as exc:
            log.error("No free database connection after %.1fs (%s)", self.timeout, op)
            raise StorageError(f"Storage unavailable while {op}", exc) from exc
        try:
            yield conn
        except sqlite3.Error as exc:
            log.exception("Error %s", op)
            raise StorageError(f"Error {op}", exc) from exc
        finally:
            self._idle.put(conn)

    def close(self) -> None:
        for conn in self._all:
            conn.close()
        self._all.clear()
