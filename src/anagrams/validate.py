from __future__ import annotations
import re
from datetime import datetime
from typing import Any, Optional, Tuple

from .config import WORD_PATTERN, DATE_PATTERN, DATE_FORMAT
from .errors import ValidationError

_WORD_RE = re.compile(WORD_PATTERN)
_DATE_RE = re.compile(DATE_PATTERN)

MISSING_WORD = "Word parameter is required in the request body"
INVALID_WORD = "Word must contain only letters"
INVALID_RANGE = "Range parameters 'from' or 'to' are invalid."


def is_valid_word(word: Any) -> bool:
    return isinstance(word, str) and bool(_WORD_RE.fullmatch(word))


def validate_word(word: Any) -> str:
    """Return ``word`` if it is a non-empty letters-only string, else raise ValidationError."""
    if word is None or (isinstance(word, str) and not word.strip()):
        raise ValidationError(MISSING_WORD)
    if not is_valid_word(word):
        raise ValidationError(INVALID_WORD)
    return word


def _parse_ts(raw: str) -> datetime:
    if not _DATE_RE.fullmatch(raw):
        raise ValidationError(INVALID_RANGE)
    try:
        return datetime.strptime(raw, DATE_FORMAT)
    except ValueError as exc:                 # e.g. month 13
        raise ValidationError(INVALID_RANGE) from exc


def parse_date_range(
    start: Optional[str], end: Optional[str]
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    Both omitted -> (None, None).
    Both given   -> parsed datetimes; ``start`` must be strictly earlier than ``end``.
    Anything else (one bound, bad format, impossible date, empty window) -> ValidationError.
    """
    if start is None and end is None:
        return None, None
    if start is None or end is None:
        raise ValidationError(INVALID_RANGE)
    lo, hi = _parse_ts(start), _parse_ts(end)
    if not lo < hi:
        raise ValidationError(INVALID_RANGE)
    return lo, hi
