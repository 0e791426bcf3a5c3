from __future__ import annotations
import logging
import os
from typing import Dict, Iterator, List

from .config import PROGRESS_EVERY_WORDS
from .keys import group_words

log = logging.getLogger(__name__)


def iter_word_list(path: str) -> Iterator[str]:
    """Yield the words of a newline-delimited list (LF or CRLF); blank lines are skipped."""
    path = os.path.abspath(path)
    n = 0
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for raw in f:
            word = raw.rstrip("\r\n").strip()
            if not word:
                continue
            n += 1
            if n % PROGRESS_EVERY_WORDS == 0:
                log.info("[scanned] words=%s", f"{n:,}")
            yield word
    log.info("[done] %s: words=%s", path, f"{n:,}")


def load_word_list(path: str) -> Dict[str, List[str]]:
    """Read ``path`` and group its words by canonical key, ready for bulk loading."""
    return group_words(iter_word_list(path))
