"""Naming rules for `Package` and `PackageVersion`.

Every rule runs regardless of the others and all violations are returned
together. Nothing here logs or raises: callers decide how to surface errors
(see `core.services.admission`).
"""

from __future__ import annotations

from core.domain.field import ErrorList, FieldPath, invalid, required
from core.domain.models import Package, PackageVersion
from core.validation.names import is_fully_qualified_name

_METADATA_NAME = FieldPath("metadata").child("name")


def validate_package(pkg: Package) -> ErrorList:
    return validate_package_name(pkg.metadata.name, _METADATA_NAME)


def validate_package_name(pkg_name: str, path: FieldPath) -> ErrorList:
    return is_fully_qualified_name(path, pkg_name)


def validate_package_version(pv: PackageVersion) -> ErrorList:
    errors: ErrorList = []
    errors.extend(
        validate_package_version_spec_package_name(
            pv.spec.package_name, FieldPath("spec", "packageName")
        )
    )
    errors.extend(validate_package_version_spec_version(pv.spec.version, FieldPath("spec", "version")))
    errors.extend(
        validate_package_version_name(pv.metadata.name, pv.spec.package_name, _METADATA_NAME)
    )
    return errors


def validate_package_version_name(pv_name: str, pkg_name: str, path: FieldPath) -> ErrorList:
    """`metadata.name` must be `<spec.packageName>.<suffix>`."""

    if pv_name.startswith(pkg_name + "."):
        return []
    return [invalid(path, pv_name, "must begin with <spec.packageName> + '.'")]


def validate_package_version_spec_version(version: str, path: FieldPath) -> ErrorList:
    if version == "":
        return [invalid(path, version, "cannot be empty")]
    return []


def validate_package_version_spec_package_name(name: str, path: FieldPath) -> ErrorList:
    # An empty name is also reported by the grammar check; both are kept.
    errors: ErrorList = []
    if name == "":
        errors.append(required(path, "can not be empty"))
    errors.extend(validate_package_name(name, path))
    return errors
