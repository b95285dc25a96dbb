"""Tagging profile management.

Profiles store named tagging preferences (performer field exclusions and the
close match threshold) as YAML files and are applied via the --profile flag.

Example profile (~/.stash-tagger/profiles/stashdb.yaml):

    name: stashdb
    description: Keep local measurements
    excluded_fields: [measurements, fake_tits]
    close_match_seconds: 3
"""

from __future__ import annotations

import re
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from stash_tagger.domain.models import PERFORMER_FILTER_FIELDS

if TYPE_CHECKING:
    from stash_tagger.config.models import Profile, TaggerConfig

_PROFILE_KEYS = frozenset(
    {"name", "description", "excluded_fields", "close_match_seconds"}
)


class ProfileError(Exception):
    """Error loading or validating a profile."""

    pass


class ProfileNotFoundError(ProfileError):
    """Profile does not exist."""

    pass


def get_profiles_directory(data_dir: Path | None = None) -> Path:
    """Get the profiles directory path.

    Returns:
        Path to <data dir>/profiles/ (~/.stash-tagger/profiles/ by default).
    """
    if data_dir is None:
        from stash_tagger.config.loader import get_data_dir

        data_dir = get_data_dir()
    return data_dir / "profiles"


def list_profiles(data_dir: Path | None = None) -> list[str]:
    """List available profile names (without .yaml extension)."""
    profiles_dir = get_profiles_directory(data_dir)
    if not profiles_dir.exists():
        return []

    return sorted(
        p.stem
        for p in profiles_dir.glob("*.yaml")
        if p.is_file() and not p.name.startswith(".")
    )


def _parse_excluded_fields(value: Any, profile_name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ProfileError(
            f"'excluded_fields' in profile '{profile_name}' must be a list of names"
        )
    unknown = set(value) - set(PERFORMER_FILTER_FIELDS)
    if unknown:
        raise ProfileError(
            f"Unknown excluded_fields in profile '{profile_name}': "
            f"{sorted(unknown)}. Valid fields are: {list(PERFORMER_FILTER_FIELDS)}"
        )
    return tuple(value)


def load_profile(name: str, data_dir: Path | None = None) -> Profile:
    """Load a profile by name.

    Args:
        name: Profile name (without .yaml extension).
        data_dir: Data directory override (defaults to get_data_dir()).

    Returns:
        Loaded Profile dataclass.

    Raises:
        ProfileNotFoundError: If profile doesn't exist.
        ProfileError: If profile is invalid.
    """
    from stash_tagger.config.models import Profile

    if not re.match(r"^[a-zA-Z0-9_-]+$", name):
        raise ProfileError(f"Profile name must be alphanumeric (with - or _): {name}")

    profile_path = get_profiles_directory(data_dir) / f"{name}.yaml"
    if not profile_path.exists():
        raise ProfileNotFoundError(f"Profile not found: {name}")

    try:
        with open(profile_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ProfileError(f"Invalid YAML in profile {name}: {e}") from e

    if not isinstance(data, dict):
        raise ProfileError(f"Profile {name} must be a YAML mapping")

    unknown_keys = set(data) - _PROFILE_KEYS
    if unknown_keys:
        raise ProfileError(
            f"Unknown keys in profile '{name}': {sorted(unknown_keys)}. "
            f"Valid keys are: {sorted(_PROFILE_KEYS)}"
        )

    excluded_fields = None
    if "excluded_fields" in data:
        excluded_fields = _parse_excluded_fields(data["excluded_fields"], name)

    close_match_seconds = data.get("close_match_seconds")
    if close_match_seconds is not None and (
        not isinstance(close_match_seconds, (int, float)) or close_match_seconds < 0
    ):
        raise ProfileError(
            f"'close_match_seconds' in profile '{name}' must be a "
            f"non-negative number, got {close_match_seconds!r}"
        )

    return Profile(
        name=data.get("name", name),
        description=data.get("description"),
        excluded_fields=excluded_fields,
        close_match_seconds=close_match_seconds,
    )


def merge_profile_with_config(profile: Profile, config: TaggerConfig) -> TaggerConfig:
    """Merge profile settings into a base config.

    Precedence (highest wins):
        1. CLI flags (applied by the caller afterwards)
        2. Profile settings
        3. Base config
        4. Defaults

    Returns:
        New TaggerConfig with profile settings merged in.
    """
    matching = config.matching
    performer = config.performer

    if profile.close_match_seconds is not None:
        matching = replace(matching, close_match_seconds=profile.close_match_seconds)
    if profile.excluded_fields is not None:
        performer = replace(performer, excluded_fields=profile.excluded_fields)

    return replace(config, matching=matching, performer=performer)
