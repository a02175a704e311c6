"""Field paths and field errors.

Why a separate module:
- Validators report *where* a problem is (`spec.version`) and *what kind* of
  problem it is, without knowing how the caller surfaces it (CLI, admission).
- Paths are plain immutable values, so they compare and hash by content.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


@dataclass(frozen=True)
class FieldPath:
    """Immutable location of a field inside an object (e.g. `metadata.name`)."""

    segments: tuple[str, ...] = ()

    def __init__(self, *names: str) -> None:
        object.__setattr__(self, "segments", tuple(names))

    @classmethod
    def _from_segments(cls, segments: Iterable[str]) -> "FieldPath":
        return cls(*segments)

    def child(self, *names: str) -> "FieldPath":
        return self._from_segments(self.segments + tuple(names))

    def index(self, i: int) -> "FieldPath":
        return self._with_subscript(str(i))

    def key(self, k: str) -> "FieldPath":
        return self._with_subscript(k)

    def root(self) -> "FieldPath":
        return self._from_segments(self.segments[:1])

    def _with_subscript(self, value: str) -> "FieldPath":
        if not self.segments:
            return self._from_segments([f"[{value}]"])
        *head, last = self.segments
        return self._from_segments([*head, f"{last}[{value}]"])

    def __str__(self) -> str:
        return ".".join(self.segments)


class ErrorType(str, Enum):
    """Classification of a field error."""

    REQUIRED = "FieldValueRequired"
    INVALID = "FieldValueInvalid"

    def label(self) -> str:
        return "Required value" if self is ErrorType.REQUIRED else "Invalid value"


@dataclass(frozen=True)
class FieldError:
    type: ErrorType
    field: FieldPath
    bad_value: Any = None
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.field}: {self.error_body()}"

    def error_body(self) -> str:
        body = self.type.label()
        if self.type is ErrorType.INVALID:
            body += f": {_render_value(self.bad_value)}"
        if self.detail:
            body += f": {self.detail}"
        return body


ErrorList = list[FieldError]


def required(path: FieldPath, detail: str = "") -> FieldError:
    return FieldError(type=ErrorType.REQUIRED, field=path, bad_value=None, detail=detail)


def invalid(path: FieldPath, value: Any, detail: str) -> FieldError:
    return FieldError(type=ErrorType.INVALID, field=path, bad_value=value, detail=detail)


def filter_errors(errors: Iterable[FieldError], error_type: ErrorType) -> ErrorList:
    """Return the errors of one kind, keeping their original order."""

    return [err for err in errors if err.type is error_type]


def errors_to_message(errors: Iterable[FieldError]) -> str:
    """Render errors as `[a, b]`, or just `a` when there is a single one."""

    rendered = [str(err) for err in errors]
    if len(rendered) == 1:
        return rendered[0]
    return "[" + ", ".join(rendered) + "]"


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if value is None:
        return "null"
    return str(value)
