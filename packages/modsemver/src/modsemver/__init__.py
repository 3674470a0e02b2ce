# SPDX-License-Identifier: MIT
"""Module-style semantic versions: parse, validate, compare and bump.

Versions take the form ``v<major>.<minor>.<patch>[-<prerelease>]`` with no
build metadata.

Example:
    >>> from modsemver import Field, new, parse, is_valid, with_prerelease
    >>>
    >>> version = parse("v1.2.3-alpha.1")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> str(version.bump(Field.MINOR))
    'v1.3.0'
    >>> str(new(2, 0, 0, with_prerelease("rc.1")))
    'v2.0.0-rc.1'
    >>>
    >>> is_valid("1.0.0")
    False
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    InvalidVersionError,
    InvalidFieldError,
    VersionParseError,
)
from .field import Field
from .options import Option, with_prerelease
from .semver import (
    Version,
    new,
    parse,
    is_valid,
    VERSION_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    latest_version,
)

__all__ = [
    # Errors
    "VersionError",
    "InvalidVersionError",
    "InvalidFieldError",
    "VersionParseError",
    # Construction and parsing
    "Field",
    "Option",
    "with_prerelease",
    "Version",
    "new",
    "parse",
    "is_valid",
    "VERSION_PATTERN",
    # Comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "latest_version",
]
