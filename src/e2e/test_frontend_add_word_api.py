from pathlib import Path
import pytest
from anagrams import Engine
from anagrams_web.web import create_app

def _seed(tmp: Path) -> str:
    p = tmp / "words.txt"
    p.write_text("cat\nact\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_add_word_then_find_it(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path), db_dsn=f"sqlite:///{tmp_path / 'a.sqlite'}")
    client = create_app(eng).test_client()

    rv = client.post("/api/v1/add-word", json={"word": "tac"})
    assert rv.status_code == 200
    assert rv.mimetype == "text/plain"
    assert rv.get_data(as_text=True) == "tac added to the dictionary successfully!"

    rv = client.get("/api/v1/similar?word=cat")
    assert rv.get_json() == {"similar": ["cat", "act", "tac"]}

    eng.shutdown()

@pytest.mark.e2e
def test_add_word_creates_new_bucket(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path), db_dsn="memory://")
    client = create_app(eng).test_client()

    assert client.post("/api/v1/add-word", json={"word": "dog"}).status_code == 200
    assert client.get("/api/v1/similar?word=god").get_json() == {"similar": ["dog"]}

    eng.shutdown()

@pytest.mark.e2e
def test_add_existing_word_is_rejected(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path), db_dsn="memory://")
    client = create_app(eng).test_client()

    rv = client.post("/api/v1/add-word", json={"word": "cat"})
    assert rv.status_code == 400
    assert rv.get_json() == {
        "type": "Word exists",
        "error": "The word: cat is already in the dictionary.",
    }
    assert eng.dictionary_size() == 2

    eng.shutdown()

@pytest.mark.e2e
def test_add_different_casing_is_accepted(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path), db_dsn="memory://")
    client = create_app(eng).test_client()

    assert client.post("/api/v1/add-word", json={"word": "Cat"}).status_code == 200
    assert eng.dictionary_size() == 3
    assert eng.index.find_word("Cat")
    assert eng.index.find_word("cat")
    assert client.get("/api/v1/similar?word=Cat").get_json() == {"similar": ["Cat"]}
    assert client.get("/api/v1/similar?word=tac").get_json() == {"similar": ["cat", "act"]}

    eng.shutdown()

@pytest.mark.e2e
@pytest.mark.parametrize("kwargs", [
    {"json": {}},
    {"json": {"word": ""}},
    {"json": {"word": "c4t"}},
    {"json": {"word": 42}},
    {"json": ["cat"]},
    {"data": "word=cat"},
])
def test_add_word_validation_errors(tmp_path: Path, kwargs):
    eng = Engine(); eng.build(_seed(tmp_path), db_dsn="memory://")
    client = create_app(eng).test_client()

    rv = client.post("/api/v1/add-word", **kwargs)
    assert rv.status_code == 400
    assert rv.get_json()["type"] == "Validation"
    assert eng.dictionary_size() == 2

    eng.shutdown()
