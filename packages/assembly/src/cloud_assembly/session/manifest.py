from __future__ import annotations

from typing import Any, Mapping

from cloud_assembly_contracts import (
    DIST_NAME,
    PROTO_RESPONSE_VERSION,
    safe_dist_version,
    validate_build_dict,
    validate_manifest_dict,
)

from .models import ArtifactDefinition, BuildStepDefinition, MetadataEntry


def _metadata_entry(entry: MetadataEntry) -> dict[str, Any]:
    out: dict[str, Any] = {"type": entry.type}
    if "data" in entry.model_fields_set:
        out["data"] = entry.data
    if entry.trace is not None:
        out["trace"] = list(entry.trace)
    return out


def artifact_record(defn: ArtifactDefinition) -> dict[str, Any]:
    """
    Serialize one artifact. `type` and `environment` are always present;
    optional fields are emitted only when non-empty, never as `[]` or `{}`.
    """
    rec: dict[str, Any] = {
        "type": defn.type.value,
        "environment": defn.environment,
    }
    if defn.dependencies:
        rec["dependencies"] = list(defn.dependencies)
    if defn.metadata:
        rec["metadata"] = {
            path: [_metadata_entry(e) for e in entries]
            for path, entries in defn.metadata.items()
        }
    if defn.properties:
        rec["properties"] = dict(defn.properties)
    if defn.missing:
        rec["missing"] = {
            key: {"provider": m.provider, "props": dict(m.props)}
            for key, m in defn.missing.items()
        }
    return rec


def runtime_info() -> dict[str, Any]:
    return {"libraries": {DIST_NAME: safe_dist_version(DIST_NAME)}}


def build_manifest(
    artifacts: Mapping[str, ArtifactDefinition],
    *,
    runtime: dict[str, Any] | None = None,
) -> dict[str, Any]:
    m: dict[str, Any] = {
        "version": PROTO_RESPONSE_VERSION,
        "artifacts": {aid: artifact_record(d) for aid, d in artifacts.items()},
    }
    if runtime is not None:
        m["runtime"] = runtime
    validate_manifest_dict(m)
    return m


def build_steps_document(steps: Mapping[str, BuildStepDefinition]) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "steps": {
            sid: {"type": s.type, "parameters": dict(s.parameters)}
            for sid, s in steps.items()
        }
    }
    validate_build_dict(doc)
    return doc
