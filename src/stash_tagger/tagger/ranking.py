"""Duration-based ranking of scene candidates.

Candidates are ranked by how closely their durations match the local file.
Both the scene's own duration and every fingerprint duration count, since
fingerprints submitted by other users often carry more accurate durations
than the scene metadata.
"""

from __future__ import annotations

import functools
import logging

from stash_tagger.domain.models import NormalizedScene

logger = logging.getLogger(__name__)

# Differences at or below this many seconds count as close matches
CLOSE_MATCH_SECONDS = 5


def duration_differences(
    scene: NormalizedScene, target_duration: float
) -> list[float]:
    """Absolute differences between target and each candidate duration.

    Never empty: the scene's own duration always contributes an entry.
    """
    return [abs(d - target_duration) for d in scene.candidate_durations]


def compare_scenes_by_duration(
    a: NormalizedScene,
    b: NormalizedScene,
    target_duration: float | None,
    close_match_seconds: float = CLOSE_MATCH_SECONDS,
) -> int:
    """Compare two scenes by closeness to a target duration.

    Scenes with more close matches rank first. When neither scene has a
    close match, the smaller best difference ranks first.

    Args:
        a: First scene.
        b: Second scene.
        target_duration: Duration of the local file in seconds.
        close_match_seconds: Threshold for a close match.

    Returns:
        Negative if a ranks first, positive if b ranks first, 0 on a tie.
    """
    if not target_duration:
        return 0

    a_diffs = duration_differences(a, target_duration)
    b_diffs = duration_differences(b, target_duration)

    a_matches = sum(1 for d in a_diffs if d <= close_match_seconds)
    b_matches = sum(1 for d in b_diffs if d <= close_match_seconds)

    if a_matches or b_matches:
        return b_matches - a_matches

    a_best = min(a_diffs)
    b_best = min(b_diffs)
    if a_best < b_best:
        return -1
    if a_best > b_best:
        return 1
    return 0


def sort_scenes_by_duration(
    scenes: list[NormalizedScene],
    target_duration: float | None = None,
    *,
    close_match_seconds: float = CLOSE_MATCH_SECONDS,
) -> list[NormalizedScene]:
    """Sort scene candidates in place by best duration match.

    The sort is stable: tied scenes, and every scene when no target is
    given, keep their input order.

    Args:
        scenes: Candidates to reorder. The list is modified in place.
        target_duration: Duration of the local file in seconds. None or 0
            leaves the order unchanged.
        close_match_seconds: Threshold for a close match.

    Returns:
        The same list, reordered.
    """
    if not target_duration:
        return scenes

    scenes.sort(
        key=functools.cmp_to_key(
            lambda a, b: compare_scenes_by_duration(
                a, b, target_duration, close_match_seconds
            )
        )
    )
    logger.debug(
        "Ranked %d scenes against target duration %ss",
        len(scenes),
        target_duration,
    )
    return scenes


def close_match_count(
    scene: NormalizedScene,
    target_duration: float,
    close_match_seconds: float = CLOSE_MATCH_SECONDS,
) -> int:
    """Number of candidate durations within close_match_seconds of target."""
    return sum(
        1
        for d in duration_differences(scene, target_duration)
        if d <= close_match_seconds
    )
