"""CLI normalize command.

Reads scraped scene candidates as returned by a stash-box provider query,
normalizes them, optionally ranks them against a local file duration, and
writes the normalized JSON.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import click

from stash_tagger.cli.exit_codes import ExitCode
from stash_tagger.config import (
    ProfileError,
    ProfileNotFoundError,
    TaggerConfig,
    load_profile,
    merge_profile_with_config,
)
from stash_tagger.domain.models import PERFORMER_FILTER_FIELDS, NormalizedScene
from stash_tagger.tagger.exceptions import TaggerError
from stash_tagger.tagger.filtering import filter_performer
from stash_tagger.tagger.normalizer import select_scenes
from stash_tagger.tagger.ranking import close_match_count, sort_scenes_by_duration

logger = logging.getLogger(__name__)


def _load_scraped_scenes(path: Path) -> list[dict[str, Any] | None]:
    """Load scraped scenes from a JSON file.

    Accepts either a bare list of scenes or an object with a "scenes" list
    (the shape of a scrapeMultiScenes/scrapeSingleScene response body).

    Raises:
        ValueError: If the document has neither shape.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("scenes")
    if not isinstance(data, list):
        raise ValueError("expected a list of scenes or an object with 'scenes'")
    return data


def _resolve_config(
    config: TaggerConfig,
    profile_name: str | None,
    excluded: tuple[str, ...],
    close_match_seconds: float | None,
) -> TaggerConfig:
    """Apply profile settings, then CLI flags, over the loaded config."""
    if profile_name:
        profile = load_profile(profile_name)
        logger.debug("Using profile %s", profile.name)
        config = merge_profile_with_config(profile, config)
    if excluded:
        config = replace(
            config, performer=replace(config.performer, excluded_fields=excluded)
        )
    if close_match_seconds is not None:
        config = replace(
            config,
            matching=replace(config.matching, close_match_seconds=close_match_seconds),
        )
    return config


def _scene_output(
    scene: NormalizedScene,
    excluded_fields: tuple[str, ...],
    target_duration: float | None,
    close_match_seconds: float,
) -> dict[str, Any]:
    output = scene.as_dict()
    output["submission_performers"] = [
        filter_performer(p, excluded_fields).as_dict() for p in scene.performers
    ]
    if target_duration:
        output["close_matches"] = close_match_count(
            scene, target_duration, close_match_seconds
        )
    return output


@click.command("normalize")
@click.argument("input_file", type=click.Path(path_type=Path))
@click.option(
    "--duration",
    "-d",
    type=click.FloatRange(min=0),
    default=None,
    help="Local file duration in seconds; ranks candidates by closeness.",
)
@click.option(
    "--profile",
    "profile_name",
    default=None,
    help="Apply a tagging profile from ~/.stash-tagger/profiles/.",
)
@click.option(
    "--exclude",
    "-x",
    "excluded",
    multiple=True,
    type=click.Choice(PERFORMER_FILTER_FIELDS),
    help="Performer field to leave out of submission data (repeatable).",
)
@click.option(
    "--close-match-seconds",
    type=click.FloatRange(min=0),
    default=None,
    help="Override the close match threshold (default: 5).",
)
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(path_type=Path),
    default=None,
    help="Write JSON to this file instead of stdout.",
)
@click.pass_context
def normalize_command(
    ctx: click.Context,
    input_file: Path,
    duration: float | None,
    profile_name: str | None,
    excluded: tuple[str, ...],
    close_match_seconds: float | None,
    output_file: Path | None,
) -> None:
    """Normalize scraped scene candidates from a JSON file.

    Examples:

        # Normalize and rank against a 31m 12s file
        stash-tagger normalize matches.json --duration 1872

        # Leave measurements out of the submission view
        stash-tagger normalize matches.json -x measurements -x fake_tits
    """
    if not input_file.exists():
        click.echo(f"Error: File not found: {input_file}", err=True)
        ctx.exit(ExitCode.TARGET_NOT_FOUND)

    try:
        config = _resolve_config(
            ctx.obj["config"], profile_name, excluded, close_match_seconds
        )
    except ProfileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.PROFILE_NOT_FOUND)
    except (ProfileError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)

    try:
        raw_scenes = _load_scraped_scenes(input_file)
    except (json.JSONDecodeError, ValueError) as e:
        click.echo(f"Error: Invalid scene file {input_file}: {e}", err=True)
        ctx.exit(ExitCode.PARSE_ERROR)

    try:
        scenes = select_scenes(raw_scenes, default_gender=config.performer.gender)
    except TaggerError as e:
        logger.error(
            "Unable to import scene data from %s: %s",
            input_file,
            e,
            extra={"input_file": str(input_file), **e.log_context()},
        )
        click.echo(f"Error: Unable to import this record: {e}", err=True)
        ctx.exit(ExitCode.PARSE_ERROR)

    threshold = config.matching.close_match_seconds
    sort_scenes_by_duration(scenes, duration, close_match_seconds=threshold)

    excluded_fields = config.performer.excluded_fields
    output = {
        "scenes": [
            _scene_output(s, excluded_fields, duration, threshold) for s in scenes
        ],
    }
    text = json.dumps(output, indent=2, ensure_ascii=False)

    if output_file is not None:
        output_file.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %d scenes to %s", len(scenes), output_file)
    else:
        click.echo(text)
