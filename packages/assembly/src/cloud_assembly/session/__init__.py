from .assembly import Assembly
from .manifest import artifact_record, build_manifest, build_steps_document
from .models import (
    ArtifactDefinition,
    BuildStepDefinition,
    MetadataEntry,
    MissingContext,
)
from .session import SynthesisSession

__all__ = [
    "ArtifactDefinition",
    "Assembly",
    "BuildStepDefinition",
    "MetadataEntry",
    "MissingContext",
    "SynthesisSession",
    "artifact_record",
    "build_manifest",
    "build_steps_document",
]
