from pathlib import Path

from pytest import mark, raises

from slidez.components.file_store import FileStore
from slidez.components.memory_store import MemoryStore


def test_memory_store() -> None:
    store = MemoryStore()
    assert store.get("key") is None
    store.set("key", b"value")
    assert store.get("key") == b"value"


def test_file_store(tmp_path: Path) -> None:
    store = FileStore(tmp_path / "store")
    assert store.get("presenter.slides.v1") is None
    store.set("presenter.slides.v1", b"{}")
    store.set("presenter.slides.v1", b'{"slides": []}')
    assert store.get("presenter.slides.v1") == b'{"slides": []}'
    assert [p.name for p in (tmp_path / "store").iterdir()] == [
        "presenter.slides.v1.json"
    ]


@mark.parametrize("key", ["", ".", "..", "a/b", "a\\b"])
def test_file_store_rejects_keys(tmp_path: Path, key: str) -> None:
    with raises(ValueError, match="invalid store key"):
        FileStore(tmp_path).get(key)


def test_file_store_cleans_up_after_failed_write(tmp_path: Path) -> None:
    store = FileStore(tmp_path)
    (tmp_path / "key.json").mkdir()
    with raises(OSError):
        store.set("key", b"{}")
    assert [p.name for p in tmp_path.iterdir()] == ["key.json"]
