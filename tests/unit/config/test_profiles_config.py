"""Tests for tagging profile loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from stash_tagger.config.models import MatchingConfig, Profile, TaggerConfig
from stash_tagger.config.profiles import (
    ProfileError,
    ProfileNotFoundError,
    get_profiles_directory,
    list_profiles,
    load_profile,
    merge_profile_with_config,
)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    profiles = tmp_path / "profiles"
    profiles.mkdir()
    (profiles / "stashdb.yaml").write_text(
        "name: stashdb\n"
        "description: Keep local measurements\n"
        "excluded_fields: [measurements, fake_tits]\n"
        "close_match_seconds: 3\n"
    )
    (profiles / "minimal.yaml").write_text("description: Nothing special\n")
    return tmp_path


def write_profile(data_dir: Path, name: str, content: str) -> None:
    (data_dir / "profiles" / f"{name}.yaml").write_text(content)


class TestListProfiles:
    def test_lists_sorted_names(self, data_dir: Path) -> None:
        assert list_profiles(data_dir) == ["minimal", "stashdb"]

    def test_ignores_hidden_and_other_files(self, data_dir: Path) -> None:
        write_profile(data_dir, ".hidden", "name: hidden\n")
        (data_dir / "profiles" / "notes.txt").write_text("x")
        assert list_profiles(data_dir) == ["minimal", "stashdb"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert list_profiles(tmp_path) == []

    def test_profiles_directory(self, tmp_path: Path) -> None:
        assert get_profiles_directory(tmp_path) == tmp_path / "profiles"


class TestLoadProfile:
    def test_full_profile(self, data_dir: Path) -> None:
        profile = load_profile("stashdb", data_dir)
        assert profile == Profile(
            name="stashdb",
            description="Keep local measurements",
            excluded_fields=("measurements", "fake_tits"),
            close_match_seconds=3,
        )

    def test_name_defaults_to_file_stem(self, data_dir: Path) -> None:
        profile = load_profile("minimal", data_dir)
        assert profile.name == "minimal"
        assert profile.excluded_fields is None
        assert profile.close_match_seconds is None

    def test_single_excluded_field_string(self, data_dir: Path) -> None:
        write_profile(data_dir, "single", "excluded_fields: height\n")
        assert load_profile("single", data_dir).excluded_fields == ("height",)

    def test_not_found(self, data_dir: Path) -> None:
        with pytest.raises(ProfileNotFoundError):
            load_profile("missing", data_dir)

    def test_invalid_name(self, data_dir: Path) -> None:
        with pytest.raises(ProfileError, match="alphanumeric"):
            load_profile("../etc", data_dir)

    def test_invalid_yaml(self, data_dir: Path) -> None:
        write_profile(data_dir, "broken", "excluded_fields: [height\n")
        with pytest.raises(ProfileError, match="Invalid YAML"):
            load_profile("broken", data_dir)

    def test_not_a_mapping(self, data_dir: Path) -> None:
        write_profile(data_dir, "listy", "- height\n")
        with pytest.raises(ProfileError, match="mapping"):
            load_profile("listy", data_dir)

    def test_unknown_key(self, data_dir: Path) -> None:
        write_profile(data_dir, "extra", "language: en\n")
        with pytest.raises(ProfileError, match="Unknown keys"):
            load_profile("extra", data_dir)

    def test_unknown_excluded_field(self, data_dir: Path) -> None:
        write_profile(data_dir, "badfield", "excluded_fields: [images]\n")
        with pytest.raises(ProfileError, match="images"):
            load_profile("badfield", data_dir)

    def test_negative_threshold(self, data_dir: Path) -> None:
        write_profile(data_dir, "negative", "close_match_seconds: -2\n")
        with pytest.raises(ProfileError, match="non-negative"):
            load_profile("negative", data_dir)


class TestMergeProfileWithConfig:
    def test_profile_values_override_config(self, data_dir: Path) -> None:
        merged = merge_profile_with_config(
            load_profile("stashdb", data_dir), TaggerConfig()
        )
        assert merged.matching.close_match_seconds == 3
        assert merged.performer.excluded_fields == ("measurements", "fake_tits")

    def test_unset_profile_values_keep_config(self, data_dir: Path) -> None:
        base = TaggerConfig(matching=MatchingConfig(close_match_seconds=7))
        merged = merge_profile_with_config(load_profile("minimal", data_dir), base)
        assert merged == base
