import pytest

from anagrams.errors import NotFoundError
from anagrams.index import AnagramIndex
from anagrams.keys import canonical_key


def test_insert_creates_then_appends(store):
    idx = AnagramIndex(store)
    key = canonical_key("cat")
    assert not idx.find_key(key)

    idx.insert("cat")
    idx.insert("act")

    assert idx.find_key(key)
    assert idx.get_words(key) == ["cat", "act"]
    assert idx.total_word_count() == 2


def test_find_word_is_exact_string_match(store):
    idx = AnagramIndex(store)
    idx.insert("cat")
    assert idx.find_word("cat")
    assert not idx.find_word("act")        # same key, different word
    assert not idx.find_word("Cat")        # different casing
    assert not idx.find_word("dog")        # no bucket at all


def test_get_words_missing_key_raises_not_found(store):
    idx = AnagramIndex(store)
    with pytest.raises(NotFoundError) as ei:
        idx.get_words("xyz")
    assert ei.value.type == "NotFound"


def test_empty_index_counts_zero(store):
    assert AnagramIndex(store).total_word_count() == 0


def test_index_keeps_duplicates(store):
    idx = AnagramIndex(store)
    idx.insert("tac")
    idx.insert("tac")
    assert idx.get_words("act") == ["tac", "tac"]


def test_bulk_load_replaces_and_is_idempotent(store):
    idx = AnagramIndex(store)
    grouped = {"act": ["cat", "act"], "dgo": ["dog", "god"]}

    assert idx.bulk_load(grouped) == 2
    once = {k: idx.get_words(k) for k in grouped}
    idx.bulk_load(grouped)
    twice = {k: idx.get_words(k) for k in grouped}

    assert once == twice == grouped
    assert idx.total_word_count() == 4


def test_bulk_load_replaces_existing_bucket_instead_of_merging(store):
    idx = AnagramIndex(store)
    idx.insert("tac")
    idx.bulk_load({"act": ["cat", "act"]})
    assert idx.get_words("act") == ["cat", "act"]


def test_bulk_load_in_small_batches(store):
    idx = AnagramIndex(store)
    grouped = {canonical_key(w): [w] for w in ("a", "bb", "ccc", "dddd", "eeeee")}
    assert idx.bulk_load(grouped, batch_size=2) == 5
    assert idx.total_word_count() == 5
    assert all(idx.find_key(k) for k in grouped)


def test_bulk_load_rejects_bad_batch_size(store):
    with pytest.raises(ValueError):
        AnagramIndex(store).bulk_load({"act": ["cat"]}, batch_size=0)
