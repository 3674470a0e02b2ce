# SPDX-License-Identifier: MIT
"""Module version parsing, construction and bumping.

Module versions are based on Semantic Versioning but deviate from it:
- Versions are prefixed with a literal ``v``: v1.2.3
- Pre-release identifiers are dot-separated alphanumerics: v1.2.3-rc.1
- Build metadata is not supported

References:
- https://go.dev/doc/modules/version-numbers
- https://semver.org/
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .errors import InvalidFieldError, InvalidVersionError, VersionError, VersionParseError
from .field import Field
from .options import Option, with_prerelease

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(
    r"^v(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>[a-zA-Z0-9]+(?:\.[a-zA-Z0-9]+)*))?$"
)

_NUMERIC_FIELDS = ("major", "minor", "patch")


@dataclass(frozen=True, slots=True, order=True)
class Version:
    """A module version.

    Use :func:`new` or :func:`parse` to build one; the dataclass constructor
    itself does not validate.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifier, empty for none (e.g. "alpha.1")
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        if not self.prerelease:
            return self.base_version
        return f"{self.base_version}-{self.prerelease}"

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the version without its pre-release."""
        return f"v{self.major}.{self.minor}.{self.patch}"

    def bump(self, field: Field, *options: Option) -> Version:
        """Return the next version for a field.

        Lower-order fields are reset to zero and the pre-release is dropped
        unless given again through ``options``.

        Raises:
            InvalidFieldError: If ``field`` is not major, minor or patch
            InvalidVersionError: If the options produce an invalid version

        Examples:
            >>> parse("v1.2.3").bump(Field.MINOR)
            Version(major=1, minor=3, patch=0, prerelease='')
        """
        field = _coerce_field(field)
        if field is Field.MAJOR:
            return new(self.major + 1, 0, 0, *options)
        if field is Field.MINOR:
            return new(self.major, self.minor + 1, 0, *options)
        return new(self.major, self.minor, self.patch + 1, *options)

    def compare(self, other: Version) -> int:
        """Compare with another version.

        Major, minor and patch are compared numerically. Ties are broken by
        comparing pre-releases as plain strings, so ``v1.0.0`` sorts before
        ``v1.0.0-alpha`` and ``alpha.10`` sorts before ``alpha.2``.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")

        for attr in (*_NUMERIC_FIELDS, "prerelease"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1
        return 0

    def is_valid(self) -> bool:
        """Return True if the version survives a render and re-parse unchanged."""
        try:
            return self.compare(parse(str(self))) == 0
        except (VersionError, TypeError, ValueError):
            return False


def _coerce_field(field: object) -> Field:
    # bool is an int subclass but never names a field
    if isinstance(field, bool) or not isinstance(field, int):
        raise InvalidFieldError(field)
    try:
        return Field(field)
    except ValueError:
        raise InvalidFieldError(field) from None


def is_valid(version_string: str) -> bool:
    """Check if a string is a valid module version.

    Examples:
        >>> is_valid("v1.0.0")
        True
        >>> is_valid("1.0.0")
        False
        >>> is_valid("v1.0.0-alpha.1")
        True
    """
    if not isinstance(version_string, str):
        return False
    return VERSION_PATTERN.fullmatch(version_string) is not None


def new(major: int, minor: int, patch: int, *options: Option) -> Version:
    """Build a version from its numbers and options.

    Options are applied in order before the result is validated.

    Raises:
        InvalidVersionError: If the resulting version is not valid

    Examples:
        >>> str(new(1, 2, 3, with_prerelease("beta")))
        'v1.2.3-beta'
    """
    version = Version(major=major, minor=minor, patch=patch)
    for option in options:
        version = option(version)

    # A matching rendering only round-trips when the fields have their parsed types
    for name in _NUMERIC_FIELDS:
        value = getattr(version, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidVersionError(
                repr(value), f"{name.capitalize()} must be an int, got {type(value).__name__}"
            )
    if not isinstance(version.prerelease, str):
        raise InvalidVersionError(
            repr(version.prerelease),
            f"Pre-release must be a string, got {type(version.prerelease).__name__}",
        )

    try:
        rendered = str(version)
    except ValueError as e:
        # int to str conversion limit exceeded
        raise InvalidVersionError("<unrenderable>", f"Cannot render version: {e}") from e

    if not is_valid(rendered):
        logger.debug("rejected constructed version %r", rendered)
        raise InvalidVersionError(rendered)

    return version


def parse(version_string: str) -> Version:
    """Parse a module version string into a Version object.

    Raises:
        InvalidVersionError: If the string does not follow the version grammar
        VersionParseError: If the string matches but a field cannot be converted

    Examples:
        >>> parse("v1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='')

        >>> parse("v1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not is_valid(version_string):
        logger.debug("rejected version string %r", version_string)
        raise InvalidVersionError(version_string)

    fields, _, prerelease = version_string[1:].partition("-")

    numbers = []
    for name, digits in zip(_NUMERIC_FIELDS, fields.split(".")):
        try:
            numbers.append(int(digits))
        except ValueError as e:
            raise VersionParseError(version_string, name, f"Cannot parse {name}: {e}") from e

    major, minor, patch = numbers
    try:
        return new(major, minor, patch, with_prerelease(prerelease))
    except InvalidVersionError as e:
        raise VersionParseError(version_string, "version", f"Cannot build version: {e}") from e
