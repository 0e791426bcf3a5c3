"""Error kinds surfaced to API callers as ``{"type": ..., "error": ...}``."""
from __future__ import annotations
from typing import Optional


class AnagramError(Exception):
    type: str = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"type": self.type, "error": self.message}


class ValidationError(AnagramError):
    """Bad or missing input (malformed word, malformed date range)."""
    type = "Validation"


class WordExistsError(AnagramError):
    type = "Word exists"

    def __init__(self, word: str) -> None:
        super().__init__(f"The word: {word} is already in the dictionary.")
        self.word = word


class NotFoundError(AnagramError):
    type = "NotFound"

    def __init__(self, key: str) -> None:
        super().__init__(f"No words are stored under key: {key}")
        self.key = key


class StorageError(AnagramError):
    """A backend read/write failed. ``cause`` holds the underlying exception."""
    type = "Storage"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
