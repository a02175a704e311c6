"""Name grammar checks.

A *fully qualified name* is a DNS-1123 subdomain with at least three
dot-separated segments (e.g. `my.pkg.example.com`).
"""

from __future__ import annotations

import re

from core.domain.field import ErrorList, FieldPath, invalid, required

DNS1123_LABEL_MAX_LENGTH = 63
DNS1123_SUBDOMAIN_MAX_LENGTH = 253

_DNS1123_LABEL_FMT = "[a-z0-9]([-a-z0-9]*[a-z0-9])?"
DNS1123_SUBDOMAIN_FMT = _DNS1123_LABEL_FMT + r"(\." + _DNS1123_LABEL_FMT + ")*"
_DNS1123_SUBDOMAIN_RE = re.compile(DNS1123_SUBDOMAIN_FMT)

_DNS1123_SUBDOMAIN_ERROR_MSG = (
    "a lowercase RFC 1123 subdomain must consist of lower case alphanumeric "
    "characters, '-' or '.', and must start and end with an alphanumeric character"
)

MIN_SEGMENTS = 3


def is_dns1123_subdomain(value: str) -> list[str]:
    """Return the syntax problems of `value` as a DNS-1123 subdomain (empty if valid)."""

    errs: list[str] = []
    if len(value) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        errs.append(f"must be no more than {DNS1123_SUBDOMAIN_MAX_LENGTH} characters")
    if any(len(label) > DNS1123_LABEL_MAX_LENGTH for label in value.split(".")):
        errs.append(
            f"each dot-separated segment must be no more than {DNS1123_LABEL_MAX_LENGTH} characters"
        )
    if not _DNS1123_SUBDOMAIN_RE.fullmatch(value):
        errs.append(
            f"{_DNS1123_SUBDOMAIN_ERROR_MSG} (e.g. 'example.com', "
            f"regex used for validation is '{DNS1123_SUBDOMAIN_FMT}')"
        )
    return errs


def is_fully_qualified_name(path: FieldPath, name: str) -> ErrorList:
    """Check `name` against the fully qualified name grammar.

    An empty name yields a single `Required` error. Otherwise the syntax and
    the segment count are both checked, so a short malformed name reports
    two errors.
    """

    if not name:
        return [required(path)]

    errors: ErrorList = []
    syntax = is_dns1123_subdomain(name)
    if syntax:
        errors.append(invalid(path, name, ",".join(syntax)))
    if len(name.split(".")) < MIN_SEGMENTS:
        errors.append(
            invalid(path, name, "should be a domain with at least three segments separated by dots")
        )
    return errors
