from pathlib import Path
import pytest
from anagrams import Engine, StorageError
from anagrams_web.web import create_app

def _seed(tmp: Path) -> str:
    p = tmp / "words.txt"
    p.write_text("evil\nlive\n", encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_home_page_renders(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path), db_dsn="memory://")
    client = create_app(eng).test_client()

    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "anagram" in html and "/api/v1/similar" in html

    eng.shutdown()

@pytest.mark.e2e
def test_health(tmp_path: Path):
    eng = Engine(); eng.build(_seed(tmp_path), db_dsn="memory://")
    client = create_app(eng).test_client()

    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True, "totalWords": 2}

    eng.shutdown()

@pytest.mark.e2e
def test_storage_failure_is_a_400_storage_payload(tmp_path: Path, monkeypatch):
    eng = Engine(); eng.build(_seed(tmp_path), db_dsn="memory://")
    client = create_app(eng).test_client()

    def boom(*_a, **_k):
        raise StorageError("Error retrieving statistics", OSError("disk gone"))
    monkeypatch.setattr(eng.stats, "aggregate", boom)

    r = client.get("/api/v1/stats")
    assert r.status_code == 400
    assert r.get_json() == {"type": "Storage", "error": "Error retrieving statistics"}

    # the app keeps serving
    assert client.get("/api/v1/similar?word=veil").get_json() == {"similar": ["evil", "live"]}

    eng.shutdown()
