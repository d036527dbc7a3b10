from .core import (
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
)
from .session import (
    ArtifactDefinition,
    Assembly,
    BuildStepDefinition,
    MetadataEntry,
    MissingContext,
    SynthesisSession,
)
from .store import FileSystemStore, InMemoryStore, SessionStore
from .synthesizer import Synthesizable, Synthesizer

__all__ = [
    "AlreadyExistsError",
    "AlreadySynthesizedError",
    "ArtifactDefinition",
    "Assembly",
    "AssemblyError",
    "BuildStepDefinition",
    "DuplicateArtifactError",
    "DuplicateBuildStepError",
    "FileSystemStore",
    "InMemoryStore",
    "InvalidDefinitionError",
    "InvalidDocumentError",
    "InvalidPathError",
    "LockedError",
    "MetadataEntry",
    "MissingContext",
    "NotFoundError",
    "SessionStore",
    "Synthesizable",
    "Synthesizer",
    "SynthesisSession",
]
