"""Durable key-value storage backends.

Each store owns a disjoint set of keys and writes its whole snapshot as a
single string value. Backends only move strings around; encoding and
decoding belong to :mod:`cinevault.state.persistence`.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Protocol, runtime_checkable

from cinevault.exceptions import CinevaultStorageError

_logger = logging.getLogger(__name__)

_VALID_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


@runtime_checkable
class KeyValueStorage(Protocol):
    """Minimal string key-value interface used by the persistence adapters."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local storage; contents vanish with the object."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class JsonFileStorage:
    """One ``<key>.json`` file per key inside a profile directory.

    Writes go to a temporary sibling file which is then renamed over the
    target, so a reader never sees a half-written value.

    Parameters
    ----------
    directory : Path
        Profile directory. Created on first write if missing.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, key: str) -> Path:
        if not _VALID_KEY.match(key):
            raise CinevaultStorageError(f"Invalid storage key: {key!r}", key=key)
        return self._directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise CinevaultStorageError(f"Failed to read {path}: {exc}", key=key) from exc

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(value, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as exc:
            raise CinevaultStorageError(f"Failed to write {path}: {exc}", key=key) from exc
        _logger.debug("Wrote key=%s (%d bytes)", key, len(value))

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise CinevaultStorageError(f"Failed to delete {path}: {exc}", key=key) from exc
        _logger.debug("Deleted key=%s", key)
