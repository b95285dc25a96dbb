"""Performer field filtering for submission forms."""

from __future__ import annotations

import logging
from collections.abc import Collection

from stash_tagger.domain.models import (
    PERFORMER_FILTER_FIELDS,
    FilteredPerformer,
    NormalizedPerformer,
)

logger = logging.getLogger(__name__)


def filter_performer(
    performer: NormalizedPerformer, excluded_fields: Collection[str]
) -> FilteredPerformer:
    """Select the submittable fields of a performer.

    A field is kept only when it is not excluded and has a truthy value.
    Attributes outside PERFORMER_FILTER_FIELDS (images, urls, social
    handles) are not part of the result.

    Args:
        performer: Normalized performer.
        excluded_fields: Field names the user chose not to import.

    Returns:
        FilteredPerformer with excluded and empty fields set to None.
    """
    excluded = set(excluded_fields)
    unknown = excluded.difference(PERFORMER_FILTER_FIELDS)
    if unknown:
        logger.debug("Ignoring unknown excluded fields: %s", sorted(unknown))

    values = {}
    for field in PERFORMER_FILTER_FIELDS:
        value = getattr(performer, field)
        values[field] = value if field not in excluded and value else None
    return FilteredPerformer(**values)
