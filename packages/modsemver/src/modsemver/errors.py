# SPDX-License-Identifier: MIT
"""Exceptions raised by modsemver."""

from __future__ import annotations

from typing import Any


class VersionError(Exception):
    """Base class for all version errors."""


class InvalidVersionError(VersionError):
    """Raised when a version string does not follow the module version grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


class InvalidFieldError(VersionError):
    """Raised when a field other than major, minor or patch is requested."""

    def __init__(self, field: Any):
        self.field = field
        super().__init__(f"Invalid field: {field!r}")


class VersionParseError(VersionError):
    """Raised when a string matches the grammar but cannot be converted.

    The underlying failure is available as ``__cause__``.
    """

    def __init__(self, version: str, field: str, message: str = ""):
        self.version = version
        self.field = field
        self.message = message or f"Cannot parse {field} of version {version!r}"
        super().__init__(self.message)
