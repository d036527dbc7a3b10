from __future__ import annotations

import json
from pathlib import PurePath
from typing import Any

from cloud_assembly.core import InvalidDocumentError, json_bytes, json_loads
from cloud_assembly.store import SessionStore


class Assembly:
    """
    JSON convenience layer over a session store.

    Reads work at any time; writes fail with LockedError once the
    underlying store is locked.
    """

    def __init__(self, store: SessionStore) -> None:
        self._store = store

    @property
    def store(self) -> SessionStore:
        return self._store

    def write_file(self, rel_path: str, data: bytes | str) -> None:
        self._store.write_file(rel_path, data)

    def read_file(self, rel_path: str) -> bytes:
        return self._store.read_file(rel_path)

    def write_json(self, rel_path: str, value: Any) -> None:
        self._store.write_file(rel_path, json_bytes(value))

    def read_json(self, rel_path: str) -> Any:
        raw = self._store.read_file(rel_path)
        try:
            return json_loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidDocumentError(f"Invalid JSON in {rel_path}: {e}") from e

    def exists(self, rel_path: str) -> bool:
        return self._store.exists(rel_path)

    def mkdir(self, rel_path: str) -> PurePath:
        return self._store.mkdir(rel_path)

    def list(self) -> list[str]:
        return self._store.list()
