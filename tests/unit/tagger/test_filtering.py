"""Unit tests for performer field filtering."""

from stash_tagger.domain.enums import GenderEnum
from stash_tagger.domain.models import (
    PERFORMER_FILTER_FIELDS,
    FilteredPerformer,
    NormalizedPerformer,
)
from stash_tagger.tagger.filtering import filter_performer


def make_performer(**kwargs) -> NormalizedPerformer:
    return NormalizedPerformer(stash_id="p-1", **{"name": "", **kwargs})


class TestFilterPerformer:
    """Tests for filter_performer."""

    def test_excluded_and_falsy_fields_cleared(self):
        performer = make_performer(
            name="Jane", gender=GenderEnum.FEMALE, birthdate=""
        )
        result = filter_performer(performer, ["gender"])
        assert result.name == "Jane"
        assert result.gender is None
        assert result.birthdate is None

    def test_no_exclusions_keeps_populated_fields(self):
        performer = make_performer(
            name="Jane",
            aliases="J",
            gender=GenderEnum.MALE,
            birthdate="1990-01-01",
            ethnicity="Asian",
            country="Japan",
            eye_color="Brown",
            height="160",
            measurements="32A",
            fake_tits="Natural",
            career_length="2010-2015",
            tattoos="None",
            piercings="Ears",
        )
        result = filter_performer(performer, [])
        for field in PERFORMER_FILTER_FIELDS:
            assert getattr(result, field) == getattr(performer, field)

    def test_every_field_can_be_excluded(self):
        performer = make_performer(name="Jane", height="170", country="France")
        result = filter_performer(performer, PERFORMER_FILTER_FIELDS)
        assert result == FilteredPerformer()

    def test_fields_outside_filter_set_dropped(self):
        """Images, urls and social handles are not carried."""
        performer = make_performer(
            name="Jane", url="https://x", twitter="jane", images=("a.jpg",)
        )
        result = filter_performer(performer, [])
        assert result.as_dict() == {"name": "Jane"}
        assert not hasattr(result, "url")
        assert not hasattr(result, "images")

    def test_unknown_excluded_names_ignored(self):
        performer = make_performer(name="Jane")
        assert filter_performer(performer, ["hair_color", "bogus"]).name == "Jane"

    def test_filter_fields_are_closed_set(self):
        assert PERFORMER_FILTER_FIELDS == (
            "name",
            "aliases",
            "gender",
            "birthdate",
            "ethnicity",
            "country",
            "eye_color",
            "height",
            "measurements",
            "fake_tits",
            "career_length",
            "tattoos",
            "piercings",
        )

    def test_source_performer_unchanged(self):
        performer = make_performer(name="Jane", height="170")
        filter_performer(performer, ["height"])
        assert performer.height == "170"
