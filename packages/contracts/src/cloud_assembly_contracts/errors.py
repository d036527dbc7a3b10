from __future__ import annotations


class ContractsError(RuntimeError):
    """Base error for contracts package failures"""


class ContractsResourceError(ContractsError):
    """
    Raised when a schema resource shipped with the contracts package cannot be
    located or read.

    This is a RuntimeError rather than FileNotFoundError: a missing resource
    means the package is mispackaged, not that a user path is wrong.
    """


class ManifestValidationError(ContractsError):
    """Document did not validate against the shipped JSON schema"""
