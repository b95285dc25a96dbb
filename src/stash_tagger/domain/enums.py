"""Domain enums for the scene tagger."""

from __future__ import annotations

from enum import Enum


class GenderEnum(Enum):
    """Performer gender as spelled by stash-box providers."""

    MALE = "MALE"
    FEMALE = "FEMALE"
    TRANSGENDER_MALE = "TRANSGENDER_MALE"
    TRANSGENDER_FEMALE = "TRANSGENDER_FEMALE"
    INTERSEX = "INTERSEX"
    NON_BINARY = "NON_BINARY"

    @classmethod
    def from_string(cls, value: str | None) -> GenderEnum | None:
        """Parse a provider gender string.

        Matching is case-insensitive and treats spaces and hyphens as
        underscores, so "Transgender Female" and "non-binary" both resolve.

        Args:
            value: Raw gender string, or None.

        Returns:
            Matching GenderEnum member, or None if absent or unrecognised.
        """
        if not value:
            return None
        key = value.strip().replace(" ", "_").replace("-", "_").upper()
        try:
            return cls(key)
        except ValueError:
            return None
