"""Resource-access contract.

Why Protocol:
- The CLI only needs "get one object by namespace/name"; where objects come
  from (manifest files, a cluster API) is an adapter concern.
- Tests can pass any object with these methods.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Package, PackageRepository, PackageVersion


@runtime_checkable
class ResourceClient(Protocol):
    """Read-only access to package objects.

    Every method raises `core.errors.ResourceNotFoundError` when the object
    does not exist.
    """

    def get_package_repository(self, namespace: str, name: str) -> PackageRepository:
        ...

    def get_package(self, namespace: str, name: str) -> Package:
        ...

    def get_package_version(self, namespace: str, name: str) -> PackageVersion:
        ...
