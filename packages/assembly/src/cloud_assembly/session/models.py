from __future__ import annotations

from typing import Annotated, Any, Optional

from cloud_assembly_contracts import ArtifactType
from pydantic import BaseModel, ConfigDict, Field, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class MetadataEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: NonEmptyStr
    data: Any = None
    trace: Optional[list[str]] = None


class MissingContext(BaseModel):
    """
    A context value the artifact needs but that was not available at
    synthesis time, keyed by the provider that can look it up.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    provider: NonEmptyStr
    props: dict[str, Any] = Field(default_factory=dict)


class ArtifactDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: ArtifactType
    environment: NonEmptyStr = Field(..., examples=["aws://123456789012/us-east-1"])
    dependencies: list[str] = Field(default_factory=list)
    metadata: dict[str, list[MetadataEntry]] = Field(default_factory=dict)
    properties: dict[str, Any] = Field(default_factory=dict)
    missing: dict[str, MissingContext] = Field(default_factory=dict)


class BuildStepDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: NonEmptyStr
    parameters: dict[str, Any] = Field(default_factory=dict)
