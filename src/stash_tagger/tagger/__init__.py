"""Scene tagger operations.

- normalizer: provider record to normalized value object mapping
- ranking: duration-based ordering of scene candidates
- filtering: performer field exclusion
- country: ISO 3166-1 country code lookup
"""

from stash_tagger.tagger.country import get_country_by_iso
from stash_tagger.tagger.exceptions import (
    EmptyPathError,
    MissingIdentifierError,
    TaggerError,
)
from stash_tagger.tagger.filtering import filter_performer
from stash_tagger.tagger.normalizer import (
    select_fingerprints,
    select_performer,
    select_performers,
    select_scene,
    select_scenes,
    select_studio,
    select_tags,
)
from stash_tagger.tagger.ranking import (
    CLOSE_MATCH_SECONDS,
    compare_scenes_by_duration,
    sort_scenes_by_duration,
)

__all__ = [
    "CLOSE_MATCH_SECONDS",
    "EmptyPathError",
    "MissingIdentifierError",
    "TaggerError",
    "compare_scenes_by_duration",
    "filter_performer",
    "get_country_by_iso",
    "select_fingerprints",
    "select_performer",
    "select_performers",
    "select_scene",
    "select_scenes",
    "select_studio",
    "select_tags",
    "sort_scenes_by_duration",
]
