from __future__ import annotations

from pathlib import PurePath, PurePosixPath
from typing import Protocol, runtime_checkable

from cloud_assembly.core import InvalidPathError


@runtime_checkable
class SessionStore(Protocol):
    """
    Write-once staging area keyed by relative path.

    Every key may be materialized (as a file or a directory) at most once for
    the lifetime of the backing medium. After `lock()` every mutation fails
    with LockedError, including writes to keys never used before.
    """

    @property
    def locked(self) -> bool: ...

    def write_file(self, rel_path: str, data: bytes | str) -> None: ...

    def read_file(self, rel_path: str) -> bytes: ...

    def exists(self, rel_path: str) -> bool: ...

    def mkdir(self, rel_path: str) -> PurePath: ...

    def list(self) -> list[str]: ...

    def lock(self) -> None: ...


def normalize_key(rel_path: str) -> PurePosixPath:
    """
    Validate a store key and return it as a relative POSIX path.

    Rejects empty keys, absolute keys, backslashes, NUL bytes and any
    `.`/`..`/empty segment.
    """
    if not isinstance(rel_path, str):
        raise InvalidPathError(f"Store key must be str, got {type(rel_path).__name__}")
    if not rel_path:
        raise InvalidPathError("Store key must not be empty")
    if "\x00" in rel_path or "\\" in rel_path:
        raise InvalidPathError(f"Illegal character in store key: {rel_path!r}")
    if rel_path.startswith("/"):
        raise InvalidPathError(f"Store key must be relative: {rel_path!r}")

    segments = rel_path.split("/")
    for seg in segments:
        if seg in ("", ".", ".."):
            raise InvalidPathError(f"Store key escapes or is not canonical: {rel_path!r}")

    return PurePosixPath(*segments)


def to_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)
