from __future__ import annotations

import os
from pathlib import Path

from cloud_assembly.core import (
    AlreadyExistsError,
    InvalidPathError,
    LockedError,
    NotFoundError,
    StoreError,
    atomic_create_bytes,
    get_logger,
)

from .base import normalize_key, to_bytes

log = get_logger(__name__)


class FileSystemStore:
    """
    Session store rooted at an existing directory.

    On-disk presence is authoritative for write-once checks, so a second
    instance over the same root still refuses to overwrite. The lock is an
    in-memory flag on this instance only; it does not touch file permissions.
    """

    def __init__(self, path: os.PathLike[str] | str) -> None:
        root = Path(path)
        if not root.is_dir():
            raise NotFoundError(f"Store root does not exist or is not a directory: {root}")
        self._root = root.resolve()
        self._locked = False

    @property
    def root(self) -> Path:
        return self._root

    @property
    def locked(self) -> bool:
        return self._locked

    def _path(self, rel_path: str) -> Path:
        key = normalize_key(rel_path)
        p = self._root.joinpath(*key.parts)

        # symlinks inside the root may still point outside it
        resolved = p.resolve()
        if resolved == self._root or not resolved.is_relative_to(self._root):
            raise InvalidPathError(f"Store key resolves outside {self._root}: {rel_path!r}")
        return p

    def _check_unlocked(self, rel_path: str) -> None:
        if self._locked:
            raise LockedError(f"Store is locked, cannot write {rel_path!r}")

    def write_file(self, rel_path: str, data: bytes | str) -> None:
        self._check_unlocked(rel_path)
        p = self._path(rel_path)
        try:
            atomic_create_bytes(p, to_bytes(data))
        except FileExistsError as e:
            raise AlreadyExistsError(f"File already exists in store: {rel_path}") from e
        except (FileNotFoundError, NotADirectoryError) as e:
            raise NotFoundError(f"Parent directory missing for {rel_path}") from e
        except OSError as e:
            raise StoreError(f"Cannot write {rel_path}: {e}") from e

    def read_file(self, rel_path: str) -> bytes:
        p = self._path(rel_path)
        if not p.is_file():
            raise NotFoundError(f"File not found in store: {rel_path}")
        return p.read_bytes()

    def exists(self, rel_path: str) -> bool:
        return self._path(rel_path).exists()

    def mkdir(self, rel_path: str) -> Path:
        self._check_unlocked(rel_path)
        p = self._path(rel_path)
        try:
            p.mkdir()
        except FileExistsError as e:
            raise AlreadyExistsError(f"Directory already exists in store: {rel_path}") from e
        except (FileNotFoundError, NotADirectoryError) as e:
            raise NotFoundError(f"Parent directory missing for {rel_path}") from e
        except OSError as e:
            raise StoreError(f"Cannot write {rel_path}: {e}") from e
        return p

    def list(self) -> list[str]:
        return sorted(os.listdir(self._root))

    def lock(self) -> None:
        if not self._locked:
            log.debug("Store locked", root=str(self._root))
        self._locked = True

    def __repr__(self) -> str:
        return f"FileSystemStore(root={str(self._root)!r}, locked={self._locked})"
