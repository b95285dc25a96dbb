"""Configuration dataclasses for the scene tagger."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from stash_tagger.domain.enums import GenderEnum
from stash_tagger.domain.models import PERFORMER_FILTER_FIELDS


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for logging output."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass(frozen=True)
class MatchingConfig:
    """Scene candidate ranking settings."""

    # Duration differences at or below this count as close matches
    close_match_seconds: float = 5

    def __post_init__(self) -> None:
        if self.close_match_seconds < 0:
            raise ValueError(
                f"close_match_seconds must be >= 0, got {self.close_match_seconds}"
            )


@dataclass(frozen=True)
class PerformerConfig:
    """Performer normalization and submission settings."""

    default_gender: str = GenderEnum.FEMALE.value
    excluded_fields: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if GenderEnum.from_string(self.default_gender) is None:
            valid = sorted(g.value for g in GenderEnum)
            raise ValueError(
                f"default_gender must be one of {valid}, got {self.default_gender}"
            )
        unknown = set(self.excluded_fields) - set(PERFORMER_FILTER_FIELDS)
        if unknown:
            raise ValueError(
                f"Unknown excluded_fields: {sorted(unknown)}. "
                f"Valid fields are: {list(PERFORMER_FILTER_FIELDS)}"
            )

    @property
    def gender(self) -> GenderEnum:
        """default_gender as a GenderEnum member."""
        return GenderEnum.from_string(self.default_gender) or GenderEnum.FEMALE


@dataclass(frozen=True)
class TaggerConfig:
    """Top-level tagger configuration."""

    matching: MatchingConfig = field(default_factory=MatchingConfig)
    performer: PerformerConfig = field(default_factory=PerformerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


@dataclass(frozen=True)
class Profile:
    """Named set of tagging preferences.

    Profiles let users keep separate field exclusions for different
    providers or libraries and apply them via --profile.
    """

    name: str
    description: str | None = None
    excluded_fields: tuple[str, ...] | None = None
    close_match_seconds: float | None = None
