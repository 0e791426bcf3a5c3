# anagrams/engine.py
from __future__ import annotations

import os
import logging
from datetime import datetime
from typing import List, Optional

from . import config as CFG
from .DB.api import AnagramStore, make_store
from .errors import WordExistsError
from .index import AnagramIndex
from .keys import canonical_key
from .loader import load_word_list
from .models import Statistics
from .stats import StatisticsAggregator

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - storage (words + stats) via an AnagramStore (SQLite or in-memory),
      - the anagram index (AnagramIndex),
      - the statistics aggregator (StatisticsAggregator).

    The store is opened here and handed to the index and aggregator; nothing
    else holds a reference to it.

    Public API (used by CLI/Flask):
      * build(words_path, db_dsn): open store -> (re)load the word list -> ready
      * load(db_dsn, words_path):  open store -> seed only if the dictionary is empty
      * similar(word), add_word(word), record(...), statistics(...)
      * shutdown():                close underlying resources

    Storage DSNs (via anagrams.DB.make_store):
      - "sqlite:///path/to/anagrams.sqlite"
      - "memory://"
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[AnagramIndex] = None
        self.stats: Optional[StatisticsAggregator] = None
        self._store: Optional[AnagramStore] = None

    # /* ~~~ Open storage and (re)load the dictionary from a flat word list ~~~ */
    def build(
        self,
        words_path: str,
        *,
        db_dsn: Optional[str] = None,          # e.g., "sqlite:///./anagrams.sqlite" or "memory://"
        batch_size: int = CFG.BULK_BATCH_SIZE,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        if not os.path.exists(words_path):
            raise FileNotFoundError(words_path)

        self._open(db_dsn or CFG.DEFAULT_DSN)
        self._seed(words_path, batch_size)
        log.info("Engine build() complete: words=%d", self.index.total_word_count())

    # /* ~~~ Open an existing store; seed it only when the dictionary is empty ~~~ */
    def load(
        self,
        *,
        db_dsn: Optional[str] = None,
        words_path: Optional[str] = None,      # used only to seed an empty dictionary
        batch_size: int = CFG.BULK_BATCH_SIZE,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        self._open(db_dsn or CFG.DEFAULT_DSN)
        size = self.index.total_word_count()
        if size == 0 and words_path:
            if os.path.exists(words_path):
                self._seed(words_path, batch_size)
            else:
                log.warning("Dictionary is empty and word list %s does not exist", words_path)
        log.info("Engine load() complete: words=%d", self.index.total_word_count())

    # ------------- dictionary -------------

    def similar(self, word: str) -> List[str]:
        """All dictionary words sharing ``word``'s canonical key ([] when none)."""
        idx = self._require()
        key = canonical_key(word)
        if not idx.find_key(key):
            return []
        return idx.get_words(key)

    def add_word(self, word: str) -> None:
        """
        Reject exact duplicates, then insert.
        The duplicate check and the insert are separate store calls: two concurrent
        requests adding the same new word can both succeed.
        """
        idx = self._require()
        if idx.find_word(word):
            raise WordExistsError(word)
        idx.insert(word)
        log.info("Added %r to the dictionary", word)

    def dictionary_size(self) -> int:
        return self._require().total_word_count()

    # ------------- statistics -------------

    def record(self, duration_us: int, observed_at: datetime) -> None:
        self._require()
        self.stats.record(duration_us, observed_at)

    def statistics(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> Statistics:
        self._require()
        return self.stats.aggregate(start, end)

    # ------------- teardown -------------

    # /* ~~~ Close underlying resources (DB handles, etc.) ~~~ */
    def shutdown(self) -> None:
        try:
            if self._store:
                self._store.close()
        finally:
            self._store = None
            self.index = None
            self.stats = None
            log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _open(self, dsn: str) -> None:
        if self._store is not None:
            self.shutdown()
        log.info("Initializing store: %s", dsn)
        store = make_store(dsn)
        self._store = store
        self.index = AnagramIndex(store)
        self.stats = StatisticsAggregator(store, self.index.total_word_count)

    def _seed(self, words_path: str, batch_size: int) -> None:
        log.info("Loading word list from %s", words_path)
        grouped = load_word_list(words_path)
        n = self.index.bulk_load(grouped, batch_size=batch_size)
        log.info("Seeded %d keys from %s", n, words_path)

    def _require(self) -> AnagramIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
        return self.index
