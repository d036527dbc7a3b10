from __future__ import annotations


class AssemblyError(RuntimeError):
    """Base error"""


class StoreError(AssemblyError):
    """Session store failure"""


class AlreadyExistsError(StoreError):
    """
    A write-once key was written twice: a file or directory already
    materialized in the store, or an id already registered in a session.
    """


class LockedError(StoreError):
    """Mutation attempted after the store was locked"""


class NotFoundError(StoreError):
    """Read of a path that was never written, or a missing store root"""


class InvalidPathError(StoreError):
    """Key is malformed or resolves outside the store root"""


class InvalidDocumentError(AssemblyError):
    """Stored bytes could not be decoded as the requested document format"""


class SessionError(AssemblyError):
    """Synthesis session failure"""


class AlreadySynthesizedError(SessionError):
    """The session was already closed"""


class InvalidDefinitionError(SessionError):
    """
    Artifact or build-step definition does not match the manifest model
    (unknown artifact type, wrong field shapes, unexpected keys).
    """


class DuplicateArtifactError(SessionError, AlreadyExistsError):
    """Artifact id already registered in this session"""


class DuplicateBuildStepError(SessionError, AlreadyExistsError):
    """Build step id already registered in this session"""
