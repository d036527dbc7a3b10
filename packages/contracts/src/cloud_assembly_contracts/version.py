from __future__ import annotations

import hashlib
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as dist_version

from .resources import (
    BUILD_SCHEMA_REL,
    MANIFEST_SCHEMA_REL,
    SCHEMA_VERSION_REL,
    read_text,
    schema_version_text,
)

DIST_NAME = "cloud-assembly"


def safe_dist_version(dist_name: str) -> str:
    try:
        return dist_version(dist_name)
    except PackageNotFoundError:
        return "0.0.0+unknown"


@dataclass(frozen=True, slots=True)
class ContractVersionInfo:
    schema_version: str
    dist_version: str
    # sha256 over VERSION and both schemas; changes whenever the wire contract does
    fingerprint: str


def schema_fingerprint() -> str:
    h = hashlib.sha256()
    for rel in (SCHEMA_VERSION_REL, MANIFEST_SCHEMA_REL, BUILD_SCHEMA_REL):
        h.update(read_text(rel).encode("utf-8"))
    return h.hexdigest()


def get_contract_version_info() -> ContractVersionInfo:
    return ContractVersionInfo(
        schema_version=schema_version_text(),
        dist_version=safe_dist_version(DIST_NAME),
        fingerprint=schema_fingerprint(),
    )
