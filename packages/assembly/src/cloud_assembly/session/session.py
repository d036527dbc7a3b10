from __future__ import annotations

import copy
from typing import Any, Mapping, TypeVar

from cloud_assembly.core import (
    AlreadyExistsError,
    AlreadySynthesizedError,
    DuplicateArtifactError,
    DuplicateBuildStepError,
    InvalidDefinitionError,
    get_logger,
    json_bytes,
    load_settings,
)
from cloud_assembly.store import SessionStore
from cloud_assembly_contracts import BUILD_FILE, MANIFEST_FILE
from pydantic import BaseModel, ValidationError

from .assembly import Assembly
from .manifest import build_manifest, build_steps_document, runtime_info
from .models import ArtifactDefinition, BuildStepDefinition

log = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def _snapshot(model: type[M], definition: M | Mapping[str, Any], *, label: str) -> M:
    # deep copy first: the caller keeps its object and may mutate it later
    if isinstance(definition, model):
        return definition.model_copy(deep=True)
    try:
        return model.model_validate(copy.deepcopy(dict(definition)))
    except (TypeError, ValueError, ValidationError) as e:
        raise InvalidDefinitionError(f"Invalid {label}: {e}") from e


class SynthesisSession:
    """
    Collects artifacts and build steps for one synthesis pass.

    Registration only records a private snapshot in memory. `close()` writes
    manifest.json (and build.json when at least one build step exists),
    then locks the store. The session stays readable after close.
    """

    def __init__(
        self,
        store: SessionStore,
        *,
        version_reporting: bool | None = None,
    ) -> None:
        if version_reporting is None:
            version_reporting = load_settings().version_reporting

        self._store = store
        self._assembly = Assembly(store)
        self._version_reporting = bool(version_reporting)
        self._artifacts: dict[str, ArtifactDefinition] = {}
        self._build_steps: dict[str, BuildStepDefinition] = {}
        self._manifest: dict[str, Any] | None = None
        self._closed = False

    @property
    def store(self) -> SessionStore:
        return self._store

    @property
    def assembly(self) -> Assembly:
        return self._assembly

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def manifest(self) -> dict[str, Any] | None:
        """The manifest written by `close()`, or None while still open."""
        return copy.deepcopy(self._manifest)

    def _check_open(self) -> None:
        if self._closed:
            raise AlreadySynthesizedError("Synthesis session is already closed")

    def add_artifact(
        self,
        artifact_id: str,
        definition: ArtifactDefinition | Mapping[str, Any],
    ) -> None:
        self._check_open()
        if artifact_id in self._artifacts:
            raise DuplicateArtifactError(f"Artifact already registered: {artifact_id}")

        art = _snapshot(ArtifactDefinition, definition, label=f"artifact {artifact_id!r}")
        self._artifacts[artifact_id] = art
        log.debug(
            "Artifact registered",
            artifact_id=artifact_id,
            type=art.type.value,
            environment=art.environment,
        )

    def add_build_step(
        self,
        step_id: str,
        definition: BuildStepDefinition | Mapping[str, Any],
    ) -> None:
        self._check_open()
        if step_id in self._build_steps:
            raise DuplicateBuildStepError(f"Build step already registered: {step_id}")

        step = _snapshot(BuildStepDefinition, definition, label=f"build step {step_id!r}")
        self._build_steps[step_id] = step
        log.debug("Build step registered", step_id=step_id, type=step.type)

    def close(self) -> dict[str, Any]:
        self._check_open()

        runtime = runtime_info() if self._version_reporting else None
        manifest = build_manifest(self._artifacts, runtime=runtime)

        # everything is built and checked before the first write
        documents = [(MANIFEST_FILE, json_bytes(manifest))]
        if self._build_steps:
            documents.append(
                (BUILD_FILE, json_bytes(build_steps_document(self._build_steps)))
            )
        for rel_path, _ in documents:
            if self._store.exists(rel_path):
                raise AlreadyExistsError(f"{rel_path} already exists in store")

        for rel_path, data in documents:
            self._store.write_file(rel_path, data)

        self._store.lock()
        self._manifest = manifest
        self._closed = True

        log.info(
            "Synthesis session closed",
            artifacts=len(self._artifacts),
            build_steps=len(self._build_steps),
        )
        return copy.deepcopy(manifest)
