"""Core utilities package.

Pure helper functions with no external dependencies, shared by the tagger
modules.
"""

from stash_tagger.core.path_parser import parse_path
from stash_tagger.core.string_utils import optional_string, to_title_case

__all__ = [
    "optional_string",
    "parse_path",
    "to_title_case",
]
