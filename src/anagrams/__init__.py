"""Public API for the anagram dictionary."""
from .engine import Engine
from .errors import AnagramError, NotFoundError, StorageError, ValidationError, WordExistsError
from .index import AnagramIndex
from .keys import canonical_key, group_words
from .models import StatSample, Statistics
from .stats import StatisticsAggregator

__all__ = [
    "Engine",
    "AnagramIndex",
    "StatisticsAggregator",
    "canonical_key",
    "group_words",
    "StatSample",
    "Statistics",
    "AnagramError",
    "ValidationError",
    "WordExistsError",
    "NotFoundError",
    "StorageError",
]
