"""Application exceptions.

Validators never raise; these exist for the layers around them (admission,
resource access, CLI).
"""

from __future__ import annotations

from core.domain.field import ErrorList, errors_to_message


class PkgctlError(Exception):
    """Base class for pkgctl errors."""


class InvalidObjectError(PkgctlError):
    """An object was rejected because it failed validation."""

    def __init__(self, kind: str, name: str, errors: ErrorList) -> None:
        self.kind = kind
        self.name = name
        self.errors = list(errors)
        super().__init__(f'{kind} "{name}" is invalid: {errors_to_message(self.errors)}')


class ResourceNotFoundError(PkgctlError):
    def __init__(self, kind: str, namespace: str, name: str) -> None:
        self.kind = kind
        self.namespace = namespace
        self.name = name
        super().__init__(f'{kind} "{name}" not found in namespace "{namespace}"')


class ManifestError(PkgctlError):
    """A manifest could not be read, parsed, or has an unsupported kind."""
