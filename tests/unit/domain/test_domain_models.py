"""Unit tests for domain value objects."""

import dataclasses

import pytest

from stash_tagger.domain.enums import GenderEnum
from stash_tagger.domain.models import (
    FilteredPerformer,
    Fingerprint,
    NormalizedPerformer,
    NormalizedScene,
    NormalizedStudio,
    NormalizedTag,
    ParsedPath,
)


class TestGenderEnum:
    """Tests for GenderEnum.from_string."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("FEMALE", GenderEnum.FEMALE),
            ("male", GenderEnum.MALE),
            ("Transgender Male", GenderEnum.TRANSGENDER_MALE),
            ("non-binary", GenderEnum.NON_BINARY),
            ("INTERSEX", GenderEnum.INTERSEX),
        ],
    )
    def test_known_values(self, value, expected):
        assert GenderEnum.from_string(value) is expected

    @pytest.mark.parametrize("value", [None, "", "unknown"])
    def test_unknown_values(self, value):
        assert GenderEnum.from_string(value) is None


class TestModels:
    """Tests for model construction and serialization."""

    def test_models_are_frozen(self):
        tag = NormalizedTag(name="Outdoor")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tag.name = "Indoor"  # type: ignore[misc]

    def test_parsed_path_as_dict(self):
        parsed = ParsedPath(("shows",), "scene", ".mp4")
        assert parsed.as_dict() == {
            "directory_segments": ["shows"],
            "file_base_name": "scene",
            "extension": ".mp4",
        }

    def test_performer_as_dict_omits_absent(self):
        performer = NormalizedPerformer(
            stash_id="p-1", name="Jane", gender=GenderEnum.FEMALE
        )
        assert performer.as_dict() == {
            "stash_id": "p-1",
            "name": "Jane",
            "gender": "FEMALE",
            "images": [],
        }

    def test_performer_as_provider_dict(self):
        performer = NormalizedPerformer(stash_id="p-1", name="Jane", id="9")
        data = performer.as_provider_dict()
        assert data["remote_site_id"] == "p-1"
        assert data["stored_id"] == "9"
        assert "stash_id" not in data
        assert "id" not in data

    def test_scene_as_dict_nests_children(self):
        scene = NormalizedScene(
            stash_id="sc-1",
            title="T",
            date="2020-01-01",
            duration=60,
            studio=NormalizedStudio(stash_id="st-1", name="S"),
            tags=(NormalizedTag(name="Tag", id="1"),),
            fingerprints=(Fingerprint("h", "MD5", 60),),
        )
        data = scene.as_dict()
        assert data["studio"] == {"stash_id": "st-1", "name": "S"}
        assert data["tags"] == [{"name": "Tag", "id": "1"}]
        assert data["fingerprints"] == [
            {"hash": "h", "algorithm": "MD5", "duration": 60}
        ]
        assert "details" not in data

    def test_candidate_durations(self):
        scene = NormalizedScene(
            stash_id="sc-1",
            title="",
            date="",
            duration=60,
            studio=NormalizedStudio(stash_id="st-1", name=""),
            fingerprints=(Fingerprint("a", "MD5", 61), Fingerprint("b", "MD5", 59)),
        )
        assert scene.candidate_durations == (60, 61, 59)

    def test_filtered_performer_as_dict(self):
        filtered = FilteredPerformer(name="Jane", gender=GenderEnum.MALE)
        assert filtered.as_dict() == {"name": "Jane", "gender": "MALE"}
