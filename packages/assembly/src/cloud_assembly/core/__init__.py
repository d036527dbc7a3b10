from .config import Settings, load_settings
from .errors import (
    AlreadyExistsError,
    AlreadySynthesizedError,
    AssemblyError,
    DuplicateArtifactError,
    DuplicateBuildStepError,
    InvalidDefinitionError,
    InvalidDocumentError,
    InvalidPathError,
    LockedError,
    NotFoundError,
    SessionError,
    StoreError,
)
from .fs import atomic_create_bytes, fsync_dir, safe_unlink
from .json import json_bytes, json_dumps, json_loads
from .logging import bind, clear_bindings, configure_logging, get_logger

__all__ = [
    "AlreadyExistsError",
    "AlreadySynthesizedError",
    "AssemblyError",
    "DuplicateArtifactError",
    "DuplicateBuildStepError",
    "InvalidDefinitionError",
    "InvalidDocumentError",
    "InvalidPathError",
    "LockedError",
    "NotFoundError",
    "SessionError",
    "Settings",
    "StoreError",
    "atomic_create_bytes",
    "bind",
    "clear_bindings",
    "configure_logging",
    "fsync_dir",
    "get_logger",
    "json_bytes",
    "json_dumps",
    "json_loads",
    "load_settings",
    "safe_unlink",
]
