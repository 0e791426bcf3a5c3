from __future__ import annotations
import os

# Input validation
WORD_PATTERN: str = r"^[a-zA-Z]+$"
DATE_PATTERN: str = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$"
DATE_FORMAT: str = "%Y-%m-%dT%H:%M:%S"

# Timestamps are persisted as naive server-local time with a fixed width so text order == time order
STORE_TS_FORMAT: str = "%Y-%m-%dT%H:%M:%S.%f"

# Bulk load: keys per all-or-nothing transaction
BULK_BATCH_SIZE: int = 50_000

# /* ~~~ SQLite connection pool ~~~ */
POOL_SIZE: int = int(os.environ.get("ANAGRAMS_POOL_SIZE", 5))
POOL_TIMEOUT: float = float(os.environ.get("ANAGRAMS_POOL_TIMEOUT", 5.0))   # seconds to wait for a free connection
DB_TIMEOUT: float = float(os.environ.get("ANAGRAMS_DB_TIMEOUT", 5.0))       # seconds to wait on a locked database

# Storage DSN: "sqlite:///path" or "memory://"
DEFAULT_DSN: str = os.environ.get("ANAGRAMS_DB", "sqlite:///./data/anagrams.sqlite")
DEFAULT_WORDS_PATH: str | None = os.environ.get("ANAGRAMS_WORDS", "./data/words_dataset.txt")

# HTTP
HOST: str = os.environ.get("HOST", "127.0.0.1")
PORT: int = int(os.environ.get("PORT", 5000))
API_URL: str = os.environ.get("ANAGRAMS_API_URL", f"http://{HOST}:{PORT}")
CLIENT_TIMEOUT: float = 5.0

# Progress logging during word list loads
PROGRESS_EVERY_WORDS: int = 100_000
