"""Provider record normalization.

This module adapts scraped stash-box records into the tagger's normalized
value objects. Input records are mappings as decoded from the provider's
GraphQL JSON: local ids live under "stored_id", remote ids under
"remote_site_id", and every other attribute may be missing or null.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from stash_tagger.core.string_utils import optional_string, optional_title_case
from stash_tagger.domain.enums import GenderEnum
from stash_tagger.domain.models import (
    Fingerprint,
    NormalizedPerformer,
    NormalizedScene,
    NormalizedStudio,
    NormalizedTag,
)
from stash_tagger.tagger.country import CountryLookup, get_country_by_iso
from stash_tagger.tagger.exceptions import MissingIdentifierError

logger = logging.getLogger(__name__)

DEFAULT_GENDER = GenderEnum.FEMALE

# Plain optional strings copied through optional_string()
_PERFORMER_STRING_FIELDS = (
    "url",
    "twitter",
    "instagram",
    "birthdate",
    "height",
    "measurements",
    "career_length",
    "aliases",
    "details",
    "death_date",
    "hair_color",
    "weight",
)

# Descriptors displayed in title case
_PERFORMER_TITLE_CASE_FIELDS = (
    "ethnicity",
    "eye_color",
    "fake_tits",
    "tattoos",
    "piercings",
)


def _require_remote_id(
    record: Mapping[str, Any], record_type: str, name: str | None
) -> str:
    """Return the record's remote_site_id or raise MissingIdentifierError."""
    remote_id = record.get("remote_site_id")
    if remote_id is None or not str(remote_id).strip():
        raise MissingIdentifierError(record_type, name)
    return str(remote_id)


def _optional_id(record: Mapping[str, Any]) -> str | None:
    stored_id = record.get("stored_id")
    return str(stored_id) if stored_id not in (None, "") else None


def _parse_gender(value: Any, default: GenderEnum) -> GenderEnum:
    if value is None or value == "":
        return default
    if isinstance(value, GenderEnum):
        return value
    gender = GenderEnum.from_string(str(value))
    if gender is None:
        logger.warning(
            "Unrecognised performer gender %r, using %s", value, default.value
        )
        return default
    return gender


def select_studio(studio: Mapping[str, Any] | None) -> NormalizedStudio:
    """Normalize a scraped studio.

    Args:
        studio: Scraped studio record.

    Returns:
        NormalizedStudio.

    Raises:
        MissingIdentifierError: If the studio is missing or has no remote id.
    """
    if studio is None:
        raise MissingIdentifierError("studio")
    name = studio.get("name") or ""
    return NormalizedStudio(
        id=_optional_id(studio),
        stash_id=_require_remote_id(studio, "studio", name),
        name=name,
        url=optional_string(studio.get("url")),
        image=optional_string(studio.get("image")),
    )


def select_tags(tags: Iterable[Mapping[str, Any]]) -> list[NormalizedTag]:
    """Normalize scraped tags; missing names become empty strings."""
    return [
        NormalizedTag(id=_optional_id(t), name=t.get("name") or "") for t in tags
    ]


def select_fingerprints(scene: Mapping[str, Any] | None) -> list[Fingerprint]:
    """Extract fingerprints from a scraped scene.

    Fingerprints are carried through as-is; a scene without fingerprints
    yields an empty list.
    """
    if scene is None:
        return []
    return [
        Fingerprint(
            hash=f.get("hash") or "",
            algorithm=f.get("algorithm") or "",
            duration=f.get("duration") or 0,
        )
        for f in scene.get("fingerprints") or []
    ]


def select_performer(
    performer: Mapping[str, Any],
    *,
    country_lookup: CountryLookup = get_country_by_iso,
    default_gender: GenderEnum = DEFAULT_GENDER,
) -> NormalizedPerformer:
    """Normalize a single scraped performer.

    Args:
        performer: Scraped performer record.
        country_lookup: Resolves ISO country codes to display names.
        default_gender: Gender used when the record has none.

    Returns:
        NormalizedPerformer with blank optional attributes set to None.

    Raises:
        MissingIdentifierError: If the performer has no remote id.
    """
    name = performer.get("name") or ""
    values: dict[str, Any] = {
        field: optional_string(performer.get(field))
        for field in _PERFORMER_STRING_FIELDS
    }
    values.update(
        {
            field: optional_title_case(performer.get(field))
            for field in _PERFORMER_TITLE_CASE_FIELDS
        }
    )
    return NormalizedPerformer(
        id=_optional_id(performer),
        stash_id=_require_remote_id(performer, "performer", name),
        name=name,
        gender=_parse_gender(performer.get("gender"), default_gender),
        country=optional_string(country_lookup(performer.get("country"))),
        images=tuple(performer.get("images") or ()),
        **values,
    )


def select_performers(
    performers: Iterable[Mapping[str, Any]],
    *,
    country_lookup: CountryLookup = get_country_by_iso,
    default_gender: GenderEnum = DEFAULT_GENDER,
) -> list[NormalizedPerformer]:
    """Normalize a list of scraped performers.

    Raises:
        MissingIdentifierError: If any performer has no remote id.
    """
    return [
        select_performer(
            p, country_lookup=country_lookup, default_gender=default_gender
        )
        for p in performers
    ]


def select_scene(
    scene: Mapping[str, Any],
    *,
    country_lookup: CountryLookup = get_country_by_iso,
    default_gender: GenderEnum = DEFAULT_GENDER,
) -> NormalizedScene:
    """Normalize a single scraped scene with its studio, tags and performers.

    Raises:
        MissingIdentifierError: If the scene, its studio or one of its
            performers has no remote id.
    """
    title = scene.get("title") or ""
    stash_id = _require_remote_id(scene, "scene", title)
    image = scene.get("image")
    return NormalizedScene(
        stash_id=stash_id,
        title=title,
        date=scene.get("date") or "",
        duration=scene.get("duration") or 0,
        details=scene.get("details"),
        url=scene.get("url"),
        images=(image,) if image else (),
        studio=select_studio(scene.get("studio")),
        fingerprints=tuple(select_fingerprints(scene)),
        performers=tuple(
            select_performers(
                scene.get("performers") or [],
                country_lookup=country_lookup,
                default_gender=default_gender,
            )
        ),
        tags=tuple(select_tags(scene.get("tags") or [])),
    )


def select_scenes(
    scenes: Iterable[Mapping[str, Any] | None] | None,
    *,
    country_lookup: CountryLookup = get_country_by_iso,
    default_gender: GenderEnum = DEFAULT_GENDER,
) -> list[NormalizedScene]:
    """Normalize scraped scene candidates.

    Null entries in the provider response are skipped.

    Args:
        scenes: Scraped scenes, possibly containing None entries, or None.
        country_lookup: Resolves ISO country codes to display names.
        default_gender: Gender used for performers with none.

    Returns:
        Normalized scenes in input order.

    Raises:
        MissingIdentifierError: On the first record lacking a remote id.
    """
    if scenes is None:
        return []
    present = [s for s in scenes if s is not None]
    result = [
        select_scene(s, country_lookup=country_lookup, default_gender=default_gender)
        for s in present
    ]
    logger.debug("Normalized %d scenes", len(result))
    return result
