"""Scene tagger data shaping for stash-box metadata providers.

Public entry points:
- parse_path: split a media file path into grouping folders, name and extension
- select_scenes / select_performers: normalize provider records
- sort_scenes_by_duration: rank scene candidates against a file duration
- filter_performer: drop excluded or empty performer fields
"""

from stash_tagger.core.path_parser import parse_path
from stash_tagger.tagger.exceptions import (
    EmptyPathError,
    MissingIdentifierError,
    TaggerError,
)
from stash_tagger.tagger.filtering import filter_performer
from stash_tagger.tagger.normalizer import (
    select_performers,
    select_scenes,
)
from stash_tagger.tagger.ranking import sort_scenes_by_duration

__version__ = "0.1.0"

__all__ = [
    "EmptyPathError",
    "MissingIdentifierError",
    "TaggerError",
    "filter_performer",
    "parse_path",
    "select_performers",
    "select_scenes",
    "sort_scenes_by_duration",
]
