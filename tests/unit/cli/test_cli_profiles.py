"""Unit tests for the profiles CLI commands."""

import json
from pathlib import Path

import pytest

from stash_tagger.cli import main
from stash_tagger.config.models import TaggerConfig


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("STASH_TAGGER_DATA_DIR", str(tmp_path))
    return tmp_path


def invoke(runner, *args):
    return runner.invoke(
        main, ["profiles", "list", *args], obj={"config": TaggerConfig()}
    )


class TestProfilesList:
    """Tests for stash-tagger profiles list."""

    def test_no_profiles(self, runner, data_dir: Path) -> None:
        result = invoke(runner)

        assert result.exit_code == 0
        assert "No profiles found" in result.output

    def test_table_output(self, runner, data_dir: Path) -> None:
        profiles = data_dir / "profiles"
        profiles.mkdir()
        (profiles / "stashdb.yaml").write_text(
            "description: Keep local measurements\n"
            "excluded_fields: [measurements]\n"
        )

        result = invoke(runner)

        assert result.exit_code == 0
        assert "stashdb" in result.output
        assert "Keep local measurements" in result.output
        assert "measurements" in result.output

    def test_json_output_includes_errors(self, runner, data_dir: Path) -> None:
        profiles = data_dir / "profiles"
        profiles.mkdir()
        (profiles / "good.yaml").write_text("close_match_seconds: 2\n")
        (profiles / "bad.yaml").write_text("language: en\n")

        result = invoke(runner, "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["name"] for item in data] == ["bad", "good"]
        assert "Unknown keys" in data[0]["error"]
        assert data[1] == {
            "name": "good",
            "description": None,
            "excluded_fields": [],
            "close_match_seconds": 2,
        }
