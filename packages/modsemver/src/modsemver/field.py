# SPDX-License-Identifier: MIT
"""Version fields that can be bumped."""

from __future__ import annotations

from enum import IntEnum

from .errors import InvalidFieldError


class Field(IntEnum):
    """A numeric component of a version.

    Values identify the member only; they are not positions in the version.
    """

    PATCH = 1
    MINOR = 2
    MAJOR = 3

    @classmethod
    def from_name(cls, name: str) -> Field:
        """Look up a field by name, ignoring case.

        Raises:
            InvalidFieldError: If the name is not major, minor or patch
        """
        if not isinstance(name, str):
            raise InvalidFieldError(name)
        try:
            return cls[name.upper()]
        except KeyError:
            raise InvalidFieldError(name) from None
