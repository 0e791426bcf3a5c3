from pathlib import Path
from anagrams.loader import iter_word_list, load_word_list


def test_iter_word_list_handles_crlf_and_blank_lines(words_file: Path):
    assert list(iter_word_list(str(words_file))) == [
        "cat", "act", "dog", "god", "tac", "listen", "silent",
    ]


def test_load_word_list_groups_by_key(words_file: Path):
    groups = load_word_list(str(words_file))
    assert groups == {
        "act": ["cat", "act", "tac"],
        "dgo": ["dog", "god"],
        "eilnst": ["listen", "silent"],
    }


def test_load_word_list_lf_only(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("evil\nlive\nveil\n", encoding="utf-8")
    assert load_word_list(str(p)) == {"eilv": ["evil", "live", "veil"]}
