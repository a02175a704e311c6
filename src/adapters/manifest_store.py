"""File-backed resource store.

Reads Kubernetes-style manifests (JSON or YAML, multi-document YAML and
`kind: List` included) from a directory and serves them by
kind/namespace/name. It implements `core.interfaces.resources.ResourceClient`.

Note:
- Files are loaded once, when the store is built.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from core.domain.models import Package, PackageRepository, PackageVersion
from core.errors import ManifestError, ResourceNotFoundError
from core.interfaces.resources import ResourceClient

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "default"
MANIFEST_SUFFIXES = (".json", ".yaml", ".yml")

KINDS: dict[str, type[BaseModel]] = {
    "Package": Package,
    "PackageVersion": PackageVersion,
    "PackageRepository": PackageRepository,
}

T = TypeVar("T", bound=BaseModel)


def _iter_documents(path: Path) -> Iterator[Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"{path}: {exc}") from exc

    try:
        if path.suffix == ".json":
            yield json.loads(raw)
        else:
            yield from yaml.safe_load_all(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ManifestError(f"{path}: {exc}") from exc


def _flatten(docs: Iterable[Any]) -> Iterator[dict[str, Any]]:
    for doc in docs:
        if doc is None:
            continue
        if not isinstance(doc, dict):
            raise ManifestError(f"expected a mapping, got {type(doc).__name__}")
        if doc.get("kind") == "List":
            yield from _flatten(doc.get("items") or [])
        else:
            yield doc


def parse_object(doc: dict[str, Any]) -> BaseModel:
    """Build the model for one manifest document, dispatching on `kind`."""

    kind = doc.get("kind")
    model = KINDS.get(kind) if isinstance(kind, str) else None
    if model is None:
        raise ManifestError(f"unsupported kind: {kind!r}")
    try:
        return model.model_validate(doc)
    except ValidationError as exc:
        raise ManifestError(f"{kind}: {exc}") from exc


def load_manifest(path: Path) -> list[BaseModel]:
    """Parse every object in one manifest file."""

    docs = list(_iter_documents(path))
    try:
        return [parse_object(doc) for doc in _flatten(docs)]
    except ManifestError as exc:
        raise ManifestError(f"{path}: {exc}") from exc


def iter_manifest_files(root: Path) -> list[Path]:
    if root.is_file():
        return [root]
    return sorted(p for p in root.rglob("*") if p.is_file() and p.suffix in MANIFEST_SUFFIXES)


class ManifestStore(ResourceClient):
    """Serves objects loaded from manifests under `root`."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._objects: dict[tuple[str, str, str], BaseModel] = {}
        if not root.exists():
            raise ManifestError(f"manifests path does not exist: {root}")
        for path in iter_manifest_files(root):
            for obj in load_manifest(path):
                self.add(obj)
        logger.debug("loaded %d objects from %s", len(self._objects), root)

    def __len__(self) -> int:
        return len(self._objects)

    def objects(self) -> list[BaseModel]:
        return list(self._objects.values())

    def add(self, obj: BaseModel) -> None:
        meta = obj.metadata  # type: ignore[attr-defined]
        key = (type(obj).__name__, meta.namespace or DEFAULT_NAMESPACE, meta.name)
        if key in self._objects:
            logger.debug("%s %s/%s defined more than once; last one wins", *key)
        self._objects[key] = obj

    def _get(self, model: type[T], namespace: str, name: str) -> T:
        kind = model.__name__
        obj = self._objects.get((kind, namespace or DEFAULT_NAMESPACE, name))
        if obj is None:
            raise ResourceNotFoundError(kind, namespace, name)
        return obj  # type: ignore[return-value]

    def get_package_repository(self, namespace: str, name: str) -> PackageRepository:
        return self._get(PackageRepository, namespace, name)

    def get_package(self, namespace: str, name: str) -> Package:
        return self._get(Package, namespace, name)

    def get_package_version(self, namespace: str, name: str) -> PackageVersion:
        return self._get(PackageVersion, namespace, name)
