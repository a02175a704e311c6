"""Admission of package objects.

This is the caller side of the validators: it runs them, logs the outcome
and turns a non-empty error list into an `InvalidObjectError`. Keeping the
logging here leaves `core.validation` free of side effects.
"""

from __future__ import annotations

import logging
from typing import Union

from core.domain.field import ErrorList, errors_to_message
from core.domain.models import Package, PackageVersion
from core.errors import InvalidObjectError
from core.validation import validate_package, validate_package_version

logger = logging.getLogger(__name__)

PackageObject = Union[Package, PackageVersion]


def validate_object(obj: PackageObject) -> ErrorList:
    """Dispatch to the validator matching the object's kind."""

    if isinstance(obj, PackageVersion):
        return validate_package_version(obj)
    if isinstance(obj, Package):
        return validate_package(obj)
    raise TypeError(f"unsupported object type: {type(obj).__name__}")


def admit(obj: PackageObject) -> PackageObject:
    """Validate `obj` and return it unchanged, or raise `InvalidObjectError`."""

    kind = type(obj).__name__
    name = obj.metadata.name
    errors = validate_object(obj)
    if errors:
        logger.warning("rejected %s %r: %s", kind, name, errors_to_message(errors))
        raise InvalidObjectError(kind, name, errors)

    logger.debug("admitted %s %r", kind, name)
    return obj
