from __future__ import annotations

import pytest
from cloud_assembly.session import (
    ArtifactDefinition,
    BuildStepDefinition,
    MetadataEntry,
    artifact_record,
    build_manifest,
    build_steps_document,
)
from cloud_assembly_contracts import ManifestValidationError


def test_metadata_entries_keep_order_and_drop_unset_keys() -> None:
    defn = ArtifactDefinition(
        type="aws:cloudformation:stack",
        environment="aws://1/r",
        metadata={
            "/stack/B": [
                MetadataEntry(type="aws:cdk:warning", data="careful", trace=["at x"]),
                MetadataEntry(type="aws:cdk:info"),
            ],
            "/stack/A": [MetadataEntry(type="aws:cdk:logicalId", data=None)],
        },
    )
    rec = artifact_record(defn)
    assert rec == {
        "type": "aws:cloudformation:stack",
        "environment": "aws://1/r",
        "metadata": {
            "/stack/B": [
                {"type": "aws:cdk:warning", "data": "careful", "trace": ["at x"]},
                {"type": "aws:cdk:info"},
            ],
            "/stack/A": [{"type": "aws:cdk:logicalId", "data": None}],
        },
    }
    assert list(rec["metadata"]) == ["/stack/B", "/stack/A"]


def test_record_key_order() -> None:
    defn = ArtifactDefinition.model_validate(
        {
            "missing": {"k": {"provider": "p", "props": {}}},
            "properties": {"templateFile": "t.json"},
            "dependencies": ["d"],
            "environment": "aws://1/r",
            "type": "aws:ecr:image",
        }
    )
    assert list(artifact_record(defn)) == [
        "type",
        "environment",
        "dependencies",
        "properties",
        "missing",
    ]


def test_build_manifest_runtime_optional() -> None:
    arts = {"a": ArtifactDefinition(type="aws:s3:object", environment="aws://1/r")}
    assert "runtime" not in build_manifest(arts)
    m = build_manifest(arts, runtime={"libraries": {"cloud-assembly": "1.0.0"}})
    assert m["runtime"] == {"libraries": {"cloud-assembly": "1.0.0"}}


def test_build_steps_document_rejects_empty() -> None:
    with pytest.raises(ManifestValidationError):
        build_steps_document({})
    doc = build_steps_document({"s": BuildStepDefinition(type="t")})
    assert doc == {"steps": {"s": {"type": "t", "parameters": {}}}}
