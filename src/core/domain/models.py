"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Manifests arrive as camelCase JSON/YAML documents; aliases let the domain
  expose snake_case attributes while accepting the wire keys untouched.
- Unknown keys are ignored: these models describe only what naming checks
  and the CLI tables read, not the full Kubernetes schema.

Note:
- These models describe *what* an object is, not *how* it is obtained.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _coerce_string_fields(cls, data: Any) -> Any:
        """YAML turns `version:` into null and `version: 1.0` into a float; keep both as text."""

        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, info in cls.model_fields.items():
            if info.annotation is not str:
                continue
            for key in {name, info.alias or name}:
                value = data.get(key)
                if key in data and value is None:
                    data[key] = ""
                elif isinstance(value, (int, float)) and not isinstance(value, bool):
                    data[key] = str(value)
        return data


class ObjectMeta(_WireModel):
    name: str = Field(default="", description="Object identifier (metadata.name).")
    namespace: str = Field(default="", description="Namespace the object lives in.")
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


class PackageSpec(_WireModel):
    ref_name: str = Field(default="", alias="refName")
    display_name: str = Field(default="", alias="displayName")
    short_description: str = Field(default="", alias="shortDescription")


class Package(_WireModel):
    """A package: identified by a fully qualified `metadata.name`."""

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PackageSpec = Field(default_factory=PackageSpec)


class PackageVersionSpec(_WireModel):
    package_name: str = Field(
        default="",
        alias="packageName",
        description="Reference to the owning `Package.metadata.name`.",
    )
    version: str = Field(default="", description="Opaque version token (e.g. '1.0.0').")
    release_notes: str = Field(default="", alias="releaseNotes")


class PackageVersion(_WireModel):
    """One released version of a package.

    `metadata.name` is expected to be `<spec.packageName>.<suffix>`.
    """

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PackageVersionSpec = Field(default_factory=PackageVersionSpec)


class ImgpkgBundleSource(_WireModel):
    image: str = ""


class ImageSource(_WireModel):
    url: str = ""


class HTTPSource(_WireModel):
    url: str = ""


class GitSource(_WireModel):
    url: str = ""
    ref: str = ""


class FetchSource(_WireModel):
    imgpkg_bundle: ImgpkgBundleSource | None = Field(default=None, alias="imgpkgBundle")
    image: ImageSource | None = None
    http: HTTPSource | None = None
    git: GitSource | None = None
    inline: dict[str, Any] | None = None


class PackageRepositorySpec(_WireModel):
    fetch: FetchSource = Field(default_factory=FetchSource)


class Condition(_WireModel):
    type: str = ""
    status: str = ""
    reason: str = ""
    message: str = ""


class PackageRepositoryStatus(_WireModel):
    friendly_description: str = Field(default="", alias="friendlyDescription")
    useful_error_message: str = Field(default="", alias="usefulErrorMessage")
    conditions: list[Condition] = Field(default_factory=list)


class PackageRepository(_WireModel):
    """A repository that packages are fetched from (display only)."""

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PackageRepositorySpec = Field(default_factory=PackageRepositorySpec)
    status: PackageRepositoryStatus = Field(default_factory=PackageRepositoryStatus)
