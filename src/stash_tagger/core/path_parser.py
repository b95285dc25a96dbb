"""Media file path parsing.

Splits a local file path into the grouping folders above the file, the base
filename and the extension. Parsing is case-insensitive: every component is
returned lower-cased so it can be matched against provider studio, performer
and title names.
"""

from __future__ import annotations

import logging
import re

from stash_tagger.domain.models import ParsedPath
from stash_tagger.tagger.exceptions import EmptyPathError

logger = logging.getLogger(__name__)

# Drive letter ("c:") or UNC prefix ("\\server")
WINDOWS_PATH_PATTERN = re.compile(r"^([a-z]:|\\\\)")
DRIVE_PREFIX_PATTERN = re.compile(r"^[a-z]:")

EXTENSION_PATTERN = re.compile(r"\.[a-z0-9]*\Z")

# Library root / show or performer folder / filename
_TRAILING_SEGMENTS = 2


def parse_path(file_path: str) -> ParsedPath:
    """Parse a file path into directory segments, base name and extension.

    Windows paths (drive letter or UNC prefix) have the drive stripped and
    backslashes converted to forward slashes. The last two segments (the
    file's own folder and the file) are dropped from directory_segments;
    paths with fewer than three segments yield no directory segments.

    Args:
        file_path: Path using "/" or Windows-style separators.

    Returns:
        ParsedPath with lower-cased components.

    Raises:
        EmptyPathError: If the path has no non-blank segments.

    Example:
        >>> parse_path("C:\\\\Shows\\\\Foo\\\\Bar\\\\scene.mp4").directory_segments
        ('shows', 'foo')
    """
    path = file_path.lower()
    if WINDOWS_PATH_PATTERN.match(path):
        path = DRIVE_PREFIX_PATTERN.sub("", path).replace("\\", "/")

    segments = [s for s in path.split("/") if s.strip()]
    if not segments:
        raise EmptyPathError(file_path)

    filename = segments[-1]
    match = EXTENSION_PATTERN.search(filename)
    extension = match.group(0) if match else ""
    base_name = filename[: len(filename) - len(extension)]

    if len(segments) > _TRAILING_SEGMENTS:
        directories = tuple(segments[:-_TRAILING_SEGMENTS])
    else:
        directories = ()

    logger.debug(
        "Parsed path %s: dirs=%s, file=%s, ext=%s",
        file_path,
        directories,
        base_name,
        extension,
    )
    return ParsedPath(
        directory_segments=directories,
        file_base_name=base_name,
        extension=extension,
    )
