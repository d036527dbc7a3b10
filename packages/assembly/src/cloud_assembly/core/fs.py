import os
import tempfile
from pathlib import Path


def safe_unlink(path: os.PathLike[str] | str) -> None:
    try:
        Path(path).unlink(missing_ok=True)
    except OSError:
        return


def fsync_dir(parent: Path) -> None:
    """
    Ensure directory entry durability after a link or rename.
    """
    fd: int | None = None
    try:
        fd = os.open(parent, os.O_RDONLY)
        os.fsync(fd)
    finally:
        if fd is not None:
            os.close(fd)


def _exclusive_write(path: Path, data: bytes, *, mode: int) -> None:
    # partial content is unlinked on failure
    created = False
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
        created = True
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
    except BaseException:
        if created:
            safe_unlink(path)
        raise


def atomic_create_bytes(path: Path, data: bytes, *, mode: int = 0o644) -> None:
    """
    Atomically create `path` with `data`, refusing to replace an existing entry.

    Guarantees:
      - readers either see no file or the complete file
      - temp file written in the same directory and fsync()'d first
      - the final step is a hard link, which fails with FileExistsError
        when `path` already exists (no overwrite, no race window)

    The parent directory must already exist.
    """
    path = Path(path)

    fd: int | None = None
    tmp_path: Path | None = None

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.",
            suffix=".tmp",
            dir=str(path.parent),
        )
        tmp_path = Path(tmp_name)

        with os.fdopen(fd, "wb") as f:
            fd = None
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        os.chmod(tmp_path, mode)

        try:
            os.link(tmp_path, path)
        except FileExistsError:
            raise
        except OSError:
            # filesystems without hard links
            _exclusive_write(path, data, mode=mode)

        fsync_dir(path.parent)

    finally:
        if fd is not None:
            try:
                os.close(fd)
            except OSError:
                pass
        if tmp_path is not None:
            safe_unlink(tmp_path)
