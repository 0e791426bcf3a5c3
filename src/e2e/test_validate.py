from datetime import datetime
import pytest

from anagrams.errors import ValidationError
from anagrams.validate import (
    INVALID_RANGE, INVALID_WORD, MISSING_WORD, is_valid_word, parse_date_range, validate_word,
)


def test_valid_words_pass_through():
    assert validate_word("abc") == "abc"
    assert validate_word("AbC") == "AbC"
    assert is_valid_word("Z")


@pytest.mark.parametrize("word", [None, "", "   "])
def test_missing_word(word):
    with pytest.raises(ValidationError) as ei:
        validate_word(word)
    assert ei.value.message == MISSING_WORD
    assert ei.value.type == "Validation"


@pytest.mark.parametrize("word", ["ab1", "a b", "héllo", "abc\n", 123, ["abc"]])
def test_non_letters_rejected(word):
    with pytest.raises(ValidationError) as ei:
        validate_word(word)
    assert ei.value.message == INVALID_WORD


def test_range_both_omitted():
    assert parse_date_range(None, None) == (None, None)


def test_range_both_given():
    lo, hi = parse_date_range("2024-01-01T00:00:00", "2024-01-02T12:30:00")
    assert lo == datetime(2024, 1, 1)
    assert hi == datetime(2024, 1, 2, 12, 30)


@pytest.mark.parametrize("start,end", [
    ("2024-01-02T00:00:00", None),                    # partial
    (None, "2024-01-02T00:00:00"),
    ("2024-01-02", "2024-01-03"),                     # wrong format
    ("2024-01-02 00:00:00", "2024-01-03T00:00:00"),
    ("2024-13-01T00:00:00", "2024-12-02T00:00:00"),   # not a real date
    ("2024-01-02T00:00:00", "2024-01-02T00:00:00"),   # from must be < to
    ("2024-01-03T00:00:00", "2024-01-02T00:00:00"),
    ("", ""),
])
def test_range_invalid(start, end):
    with pytest.raises(ValidationError) as ei:
        parse_date_range(start, end)
    assert ei.value.message == INVALID_RANGE
