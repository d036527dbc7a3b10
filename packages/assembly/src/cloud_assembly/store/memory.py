from __future__ import annotations

from pathlib import PurePosixPath

from cloud_assembly.core import AlreadyExistsError, LockedError, NotFoundError, get_logger

from .base import normalize_key, to_bytes

log = get_logger(__name__)

_ROOT = PurePosixPath("/")


class InMemoryStore:
    """
    Session store kept entirely in process memory.

    Follows the same write-once and lock contract as FileSystemStore;
    `mkdir` returns a virtual path under "/".
    """

    def __init__(self) -> None:
        self._files: dict[PurePosixPath, bytes] = {}
        self._dirs: set[PurePosixPath] = set()
        self._locked = False

    @property
    def locked(self) -> bool:
        return self._locked

    def _materialized(self, key: PurePosixPath) -> bool:
        return key in self._files or key in self._dirs

    def _require_parent(self, key: PurePosixPath, rel_path: str) -> None:
        parent = key.parent
        if parent != PurePosixPath(".") and parent not in self._dirs:
            raise NotFoundError(f"Parent directory missing for {rel_path}")

    def write_file(self, rel_path: str, data: bytes | str) -> None:
        if self._locked:
            raise LockedError(f"Store is locked, cannot write {rel_path!r}")
        key = normalize_key(rel_path)
        if self._materialized(key):
            raise AlreadyExistsError(f"File already exists in store: {rel_path}")
        self._require_parent(key, rel_path)
        self._files[key] = to_bytes(data)

    def read_file(self, rel_path: str) -> bytes:
        key = normalize_key(rel_path)
        try:
            return self._files[key]
        except KeyError as e:
            raise NotFoundError(f"File not found in store: {rel_path}") from e

    def exists(self, rel_path: str) -> bool:
        return self._materialized(normalize_key(rel_path))

    def mkdir(self, rel_path: str) -> PurePosixPath:
        if self._locked:
            raise LockedError(f"Store is locked, cannot write {rel_path!r}")
        key = normalize_key(rel_path)
        if self._materialized(key):
            raise AlreadyExistsError(f"Directory already exists in store: {rel_path}")
        self._require_parent(key, rel_path)
        self._dirs.add(key)
        return _ROOT / key

    def list(self) -> list[str]:
        names = {k.parts[0] for k in self._files}
        names.update(k.parts[0] for k in self._dirs)
        return sorted(names)

    def lock(self) -> None:
        if not self._locked:
            log.debug("Store locked", store="memory", files=len(self._files))
        self._locked = True
