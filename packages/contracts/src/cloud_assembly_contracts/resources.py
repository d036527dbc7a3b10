from __future__ import annotations

import json
from importlib.resources import files
from typing import Any, Final

from .errors import ContractsResourceError

PKG: Final[str] = "cloud_assembly_contracts"

MANIFEST_SCHEMA_REL: Final[str] = "schema/jsonschema/manifest.schema.json"
BUILD_SCHEMA_REL: Final[str] = "schema/jsonschema/build.schema.json"
SCHEMA_VERSION_REL: Final[str] = "schema/VERSION"


def traversable(rel_path: str):
    return files(PKG).joinpath(rel_path)


def read_text(rel_path: str) -> str:
    try:
        return traversable(rel_path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ContractsResourceError(f"Missing contracts resource: {rel_path}") from e
    except OSError as e:  # pragma: no cover
        raise ContractsResourceError(
            f"Failed reading contracts resource: {rel_path}: {e}"
        ) from e


def read_json(rel_path: str) -> dict[str, Any]:
    raw = read_text(rel_path)
    try:
        obj = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ContractsResourceError(
            f"Invalid JSON in contracts resource: {rel_path}: {e}"
        ) from e
    if not isinstance(obj, dict):
        raise ContractsResourceError(
            f"Expected JSON object in {rel_path}, got {type(obj).__name__}"
        )
    return obj


def manifest_schema() -> dict[str, Any]:
    """
    JSON Schema for manifest.json
    """
    return read_json(MANIFEST_SCHEMA_REL)


def build_schema() -> dict[str, Any]:
    """
    JSON Schema for build.json
    """
    return read_json(BUILD_SCHEMA_REL)


def schema_version_text() -> str:
    """
    Manifest schema version written into every manifest
    """
    s = read_text(SCHEMA_VERSION_REL).strip()
    if not s:
        raise ContractsResourceError(f"{SCHEMA_VERSION_REL} is empty")
    return s
