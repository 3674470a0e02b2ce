# SPDX-License-Identifier: MIT
"""Version comparison and sorting helpers.

Ordering: major, minor and patch numerically, then pre-release as a plain
string. A release sorts before its own pre-releases (v1.0.0 < v1.0.0-rc).
"""

from __future__ import annotations

from typing import Iterable, Union

from .semver import Version, parse


def _as_version(version: Union[str, Version]) -> Version:
    return parse(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two module versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("v1.0.0", "v2.0.0")
        -1
        >>> compare_versions("v1.0.0-alpha.1", "v1.0.0-alpha.2")
        -1
        >>> compare_versions("v2.0.0", "v1.9.9")
        1
    """
    return _as_version(version1).compare(_as_version(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with :meth:`Version.compare`.

    Examples:
        >>> sorted(["v1.0.0-rc", "v2.0.0", "v1.0.0"], key=version_key)
        ['v1.0.0', 'v1.0.0-rc', 'v2.0.0']
    """
    v = _as_version(version)
    return (v.major, v.minor, v.patch, v.prerelease)


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Version]:
    """Parse and sort versions, oldest first unless ``reverse`` is set."""
    return sorted((_as_version(v) for v in versions), key=version_key, reverse=reverse)


def latest_version(versions: Iterable[Union[str, Version]]) -> Version:
    """Return the greatest version.

    Raises:
        ValueError: If ``versions`` is empty
        InvalidVersionError: If any version string is invalid
    """
    parsed = [_as_version(v) for v in versions]
    if not parsed:
        raise ValueError("No versions given")
    return max(parsed, key=version_key)
