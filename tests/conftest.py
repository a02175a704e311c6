from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.domain.models import ObjectMeta, Package, PackageVersion, PackageVersionSpec


def make_package_version(name: str, package_name: str, version: str) -> PackageVersion:
    return PackageVersion(
        metadata=ObjectMeta(name=name),
        spec=PackageVersionSpec(package_name=package_name, version=version),
    )


@pytest.fixture
def valid_package() -> Package:
    return Package(metadata=ObjectMeta(name="my.pkg.example.com"))


@pytest.fixture
def valid_package_version() -> PackageVersion:
    return make_package_version("my.pkg.example.com.1.0.0", "my.pkg.example.com", "1.0.0")


REPOSITORY_DOC = {
    "apiVersion": "packaging.carvel.dev/v1alpha1",
    "kind": "PackageRepository",
    "metadata": {"name": "tanzu-core", "namespace": "kapp-controller"},
    "spec": {"fetch": {"imgpkgBundle": {"image": "registry.example.com/core:1.0"}}},
    "status": {
        "friendlyDescription": "Reconcile succeeded",
        "usefulErrorMessage": "",
        "conditions": [{"type": "ReconcileSucceeded", "status": "True"}],
    },
}

PACKAGES_YAML = """\
apiVersion: data.packaging.carvel.dev/v1alpha1
kind: Package
metadata:
  name: my.pkg.example.com
---
apiVersion: data.packaging.carvel.dev/v1alpha1
kind: PackageVersion
metadata:
  name: my.pkg.example.com.1.0.0
spec:
  packageName: my.pkg.example.com
  version: 1.0.0
"""

INVALID_YAML = """\
kind: List
items:
- kind: Package
  metadata:
    name: a.b
- kind: PackageVersion
  metadata:
    name: other.1.0.0
  spec:
    packageName: my.pkg.example.com
    version: ""
"""


@pytest.fixture
def manifests_dir(tmp_path: Path) -> Path:
    root = tmp_path / "manifests"
    (root / "repos").mkdir(parents=True)
    (root / "repos" / "core.json").write_text(json.dumps(REPOSITORY_DOC), encoding="utf-8")
    (root / "packages.yaml").write_text(PACKAGES_YAML, encoding="utf-8")
    return root


@pytest.fixture
def invalid_manifest(tmp_path: Path) -> Path:
    path = tmp_path / "invalid.yml"
    path.write_text(INVALID_YAML, encoding="utf-8")
    return path
