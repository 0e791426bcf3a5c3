from pathlib import Path
import pytest
from anagrams.DB import make_store


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path: Path):
    dsn = "memory://" if request.param == "memory" else f"sqlite:///{tmp_path / 'anagrams.sqlite'}"
    s = make_store(dsn)
    yield s
    s.close()


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    p = tmp_path / "words_dataset.txt"
    # CRLF line endings plus a blank line
    p.write_bytes(b"cat\r\nact\r\ndog\r\ngod\r\ntac\r\n\r\nlisten\r\nsilent\r\n")
    return p
