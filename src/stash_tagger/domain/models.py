"""Normalized value objects produced by the tagger.

These dataclasses are the internal shape used by the rest of the application
after provider records have been adapted. All of them are frozen; sequences
are stored as tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from stash_tagger.domain.enums import GenderEnum


def _json_value(value: Any) -> Any:
    """Convert a model attribute into a JSON-ready value."""
    if isinstance(value, GenderEnum):
        return value.value
    if isinstance(value, tuple):
        return [_json_value(v) for v in value]
    if hasattr(value, "as_dict"):
        return value.as_dict()
    return value


def _compact_dict(obj: Any) -> dict[str, Any]:
    """Build a dict from a dataclass, omitting absent optional fields."""
    result: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[f.name] = _json_value(value)
    return result


@dataclass(frozen=True)
class ParsedPath:
    """Components of a media file path.

    All components are lower-cased. directory_segments holds the grouping
    folders above the file's own folder (empty for shallow paths).
    """

    directory_segments: tuple[str, ...]
    file_base_name: str
    extension: str  # Including the leading dot, or "" if none

    def as_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "directory_segments": list(self.directory_segments),
            "file_base_name": self.file_base_name,
            "extension": self.extension,
        }


@dataclass(frozen=True)
class Fingerprint:
    """Content hash reported by the provider for a scene."""

    hash: str
    algorithm: str  # e.g., "MD5", "OSHASH", "PHASH"
    duration: int  # Seconds

    def as_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "algorithm": self.algorithm,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class NormalizedTag:
    """Tag attached to a provider scene."""

    name: str
    id: str | None = None  # Local tag id when already stored

    def as_dict(self) -> dict[str, Any]:
        return _compact_dict(self)

    def as_provider_dict(self) -> dict[str, Any]:
        return {"stored_id": self.id, "name": self.name}


@dataclass(frozen=True)
class NormalizedStudio:
    """Studio that released a provider scene."""

    stash_id: str
    name: str
    id: str | None = None
    url: str | None = None
    image: str | None = None  # Logo URL

    def as_dict(self) -> dict[str, Any]:
        return _compact_dict(self)

    def as_provider_dict(self) -> dict[str, Any]:
        return {
            "stored_id": self.id,
            "remote_site_id": self.stash_id,
            "name": self.name,
            "url": self.url,
            "image": self.image,
        }


@dataclass(frozen=True)
class NormalizedPerformer:
    """Performer record after normalization.

    Every optional string attribute is either a non-blank value or None.
    """

    stash_id: str
    name: str
    id: str | None = None
    gender: GenderEnum | None = None
    url: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    birthdate: str | None = None
    ethnicity: str | None = None
    country: str | None = None  # Display name, not ISO code
    eye_color: str | None = None
    height: str | None = None
    measurements: str | None = None
    fake_tits: str | None = None
    career_length: str | None = None
    tattoos: str | None = None
    piercings: str | None = None
    aliases: str | None = None
    images: tuple[str, ...] = ()
    details: str | None = None
    death_date: str | None = None
    hair_color: str | None = None
    weight: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return _compact_dict(self)

    def as_provider_dict(self) -> dict[str, Any]:
        """Convert back to the provider record shape.

        Used by the submission pathway; normalizing the result reproduces
        this performer.
        """
        data = _compact_dict(self)
        data.pop("stash_id")
        data.pop("id", None)
        data["remote_site_id"] = self.stash_id
        data["stored_id"] = self.id
        return data


@dataclass(frozen=True)
class NormalizedScene:
    """Scene candidate returned by a provider, normalized."""

    stash_id: str
    title: str
    date: str
    duration: int
    studio: NormalizedStudio
    details: str | None = None
    url: str | None = None
    images: tuple[str, ...] = ()
    tags: tuple[NormalizedTag, ...] = ()
    performers: tuple[NormalizedPerformer, ...] = ()
    fingerprints: tuple[Fingerprint, ...] = ()

    @property
    def candidate_durations(self) -> tuple[int, ...]:
        """Scene duration followed by every fingerprint duration."""
        return (self.duration, *(f.duration for f in self.fingerprints))

    def as_dict(self) -> dict[str, Any]:
        return _compact_dict(self)

    def as_provider_dict(self) -> dict[str, Any]:
        return {
            "remote_site_id": self.stash_id,
            "title": self.title,
            "date": self.date,
            "duration": self.duration,
            "details": self.details,
            "url": self.url,
            "image": self.images[0] if self.images else None,
            "studio": self.studio.as_provider_dict(),
            "tags": [t.as_provider_dict() for t in self.tags],
            "performers": [p.as_provider_dict() for p in self.performers],
            "fingerprints": [f.as_dict() for f in self.fingerprints],
        }


@dataclass(frozen=True)
class FilteredPerformer:
    """Performer fields selected for a submission form.

    Only the fields listed in PERFORMER_FILTER_FIELDS are carried; a field is
    None when it was excluded by the user or empty on the source performer.
    """

    name: str | None = None
    aliases: str | None = None
    gender: GenderEnum | None = None
    birthdate: str | None = None
    ethnicity: str | None = None
    country: str | None = None
    eye_color: str | None = None
    height: str | None = None
    measurements: str | None = None
    fake_tits: str | None = None
    career_length: str | None = None
    tattoos: str | None = None
    piercings: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return _compact_dict(self)


PERFORMER_FILTER_FIELDS: tuple[str, ...] = tuple(
    f.name for f in fields(FilteredPerformer)
)
