"""Domain value objects for the scene tagger."""

from stash_tagger.domain.enums import GenderEnum
from stash_tagger.domain.models import (
    FilteredPerformer,
    Fingerprint,
    NormalizedPerformer,
    NormalizedScene,
    NormalizedStudio,
    NormalizedTag,
    ParsedPath,
)

__all__ = [
    "FilteredPerformer",
    "Fingerprint",
    "GenderEnum",
    "NormalizedPerformer",
    "NormalizedScene",
    "NormalizedStudio",
    "NormalizedTag",
    "ParsedPath",
]
