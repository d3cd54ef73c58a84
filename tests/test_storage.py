from __future__ import annotations

from pathlib import Path

import pytest

from cinevault.exceptions import CinevaultStorageError
from cinevault.storage import JsonFileStorage, KeyValueStorage, MemoryStorage


def test_memory_storage_basic_operations() -> None:
    storage = MemoryStorage()
    assert storage.get("cart") is None
    storage.set("cart", "[]")
    assert storage.get("cart") == "[]"
    storage.delete("cart")
    storage.delete("cart")
    assert storage.get("cart") is None


def test_backends_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(MemoryStorage(), KeyValueStorage)
    assert isinstance(JsonFileStorage(tmp_path), KeyValueStorage)


def test_json_file_storage_round_trip(tmp_path: Path) -> None:
    profile = tmp_path / "profile"
    storage = JsonFileStorage(profile)

    assert storage.get("user") is None
    storage.set("user", '{"id":"1"}')

    assert (profile / "user.json").read_text(encoding="utf-8") == '{"id":"1"}'
    assert JsonFileStorage(profile).get("user") == '{"id":"1"}'
    assert not list(profile.glob("*.tmp"))


def test_json_file_storage_delete(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    storage.set("cart", "[]")
    storage.delete("cart")
    storage.delete("cart")
    assert storage.get("cart") is None


def test_json_file_storage_rejects_path_like_keys(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    with pytest.raises(CinevaultStorageError):
        storage.set("../escape", "x")


def test_json_file_storage_write_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    storage = JsonFileStorage(blocker / "profile")
    with pytest.raises(CinevaultStorageError) as excinfo:
        storage.set("cart", "[]")
    assert excinfo.value.key == "cart"


def test_json_file_storage_undecodable_file_is_read_failure(tmp_path: Path) -> None:
    (tmp_path / "cart.json").write_bytes(b"\xff\xfe[garbage")
    storage = JsonFileStorage(tmp_path)
    with pytest.raises(CinevaultStorageError) as excinfo:
        storage.get("cart")
    assert excinfo.value.key == "cart"


def test_json_file_storage_returns_nested_text_verbatim(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    storage.set("cart", "[" * 100_000)
    assert storage.get("cart") == "[" * 100_000
