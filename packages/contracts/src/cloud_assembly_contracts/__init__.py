from __future__ import annotations

from .artifacts import BUILD_FILE, MANIFEST_FILE, PROTO_RESPONSE_VERSION, ArtifactType
from .errors import ContractsError, ContractsResourceError, ManifestValidationError
from .manifest import validate_build_dict, validate_manifest_dict, validate_manifest_json
from .resources import build_schema, manifest_schema, schema_version_text
from .version import (
    DIST_NAME,
    ContractVersionInfo,
    get_contract_version_info,
    safe_dist_version,
)

__all__ = [
    "ArtifactType",
    "MANIFEST_FILE",
    "BUILD_FILE",
    "PROTO_RESPONSE_VERSION",
    "ContractsError",
    "ContractsResourceError",
    "ManifestValidationError",
    "manifest_schema",
    "build_schema",
    "schema_version_text",
    "validate_manifest_dict",
    "validate_manifest_json",
    "validate_build_dict",
    "DIST_NAME",
    "ContractVersionInfo",
    "get_contract_version_info",
    "safe_dist_version",
]
