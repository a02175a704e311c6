"""Pure validators for package metadata.

Why a package:
- Groups the name grammar (leaf) and the per-entity rules built on it.
- No I/O, no logging: safe to call from any thread, any number of times.
"""

from core.validation.names import is_dns1123_subdomain, is_fully_qualified_name
from core.validation.packages import (
    validate_package,
    validate_package_name,
    validate_package_version,
    validate_package_version_name,
    validate_package_version_spec_package_name,
    validate_package_version_spec_version,
)

__all__ = [
    "is_dns1123_subdomain",
    "is_fully_qualified_name",
    "validate_package",
    "validate_package_name",
    "validate_package_version",
    "validate_package_version_name",
    "validate_package_version_spec_package_name",
    "validate_package_version_spec_version",
]
