"""Tests for string helpers."""

from stash_tagger.core.string_utils import (
    optional_string,
    optional_title_case,
    to_title_case,
)


class TestToTitleCase:
    """Tests for to_title_case function."""

    def test_uppercase_word(self) -> None:
        assert to_title_case("BLONDE") == "Blonde"

    def test_multiple_words(self) -> None:
        assert to_title_case("light brown") == "Light Brown"

    def test_mixed_case(self) -> None:
        assert to_title_case("lEFT aNKLE") == "Left Ankle"

    def test_already_title_case_is_stable(self) -> None:
        assert to_title_case("Light Brown") == "Light Brown"

    def test_splits_on_single_spaces_only(self) -> None:
        """Runs of spaces are preserved; hyphens do not split words."""
        assert to_title_case("light  brown") == "Light  Brown"
        assert to_title_case("blue-green") == "Blue-green"

    def test_empty_string(self) -> None:
        assert to_title_case("") == ""


class TestOptionalString:
    """Tests for optional_string and optional_title_case."""

    def test_none_stays_none(self) -> None:
        assert optional_string(None) is None

    def test_empty_and_blank_become_none(self) -> None:
        assert optional_string("") is None
        assert optional_string("   ") is None

    def test_value_returned_unchanged(self) -> None:
        assert optional_string(" 36C ") == " 36C "

    def test_non_string_values_converted(self) -> None:
        assert optional_string(168) == "168"
        assert optional_string(0) == "0"

    def test_optional_title_case_non_string(self) -> None:
        assert optional_title_case(42) == "42"

    def test_optional_title_case(self) -> None:
        assert optional_title_case("NATURAL") == "Natural"
        assert optional_title_case("") is None
        assert optional_title_case(None) is None
