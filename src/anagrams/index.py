from __future__ import annotations
import logging
from itertools import islice
from typing import Iterator, List, Mapping, Sequence

from .config import BULK_BATCH_SIZE
from .DB.api import WordStore
from .errors import NotFoundError
from .keys import canonical_key

log = logging.getLogger(__name__)


def _batches(grouped: Mapping[str, Sequence[str]], size: int) -> Iterator[dict]:
    it = iter(grouped)
    while True:
        keys = list(islice(it, size))
        if not keys:
            return
        yield {k: grouped[k] for k in keys}


class AnagramIndex:
    """
    Canonical key -> bucket of words, persisted in an injected WordStore.

    A key with no words never exists: buckets are only created by the first
    insert/load for that key and are never emptied.
    """

    def __init__(self, store: WordStore) -> None:
        self._store = store

    # ------------- queries -------------

    def find_key(self, key: str) -> bool:
        return self._store.has_key(key)

    def find_word(self, word: str) -> bool:
        """Exact string membership (so "Cat" and "cat" are different words)."""
        return self._store.has_word(canonical_key(word), word)

    def get_words(self, key: str) -> List[str]:
        words = self._store.get_words(key)
        if words is None:
            raise NotFoundError(key)
        return words

    def total_word_count(self) -> int:
        return self._store.count_words()

    # ------------- mutations -------------

    def insert(self, word: str) -> None:
        # the store does create-or-append in one atomic step; no read-then-write here
        key = canonical_key(word)
        self._store.append_word(key, word)
        log.debug("Inserted %r under key %r", word, key)

    def bulk_load(self, grouped: Mapping[str, Sequence[str]], *, batch_size: int = BULK_BATCH_SIZE) -> int:
        """
        Replace the buckets of every key in ``grouped`` (idempotent).
        Keys are written in sequential batches of ``batch_size``; each batch commits
        or rolls back as a whole. Returns the number of keys written.
        """
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")
        total = 0
        for n, batch in enumerate(_batches(grouped, batch_size), 1):
            total += self._store.replace_buckets(batch)
            log.info("Bulk load: committed batch %d (%d keys, %d so far)", n, len(batch), total)
        return total
