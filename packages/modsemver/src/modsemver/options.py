# SPDX-License-Identifier: MIT
"""Construction options for versions.

An option takes a candidate version and returns a modified copy. Options are
applied in the order given, so when two options set the same attribute the
last one wins. The result is validated after all options have been applied.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .semver import Version

Option = Callable[["Version"], "Version"]


def with_prerelease(prerelease: str) -> Option:
    """Return an option that sets the pre-release identifier.

    An empty string clears the pre-release.

    Examples:
        >>> from modsemver import new
        >>> str(new(1, 0, 0, with_prerelease("rc.1")))
        'v1.0.0-rc.1'
    """

    def apply(version: Version) -> Version:
        return replace(version, prerelease=prerelease)

    return apply
