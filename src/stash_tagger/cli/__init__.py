"""CLI module for the scene tagger."""

import logging
from dataclasses import replace
from pathlib import Path

import click

from stash_tagger.cli.exit_codes import ExitCode
from stash_tagger.config import ConfigError, get_config
from stash_tagger.logging import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="stash-tagger")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Config file (default: ~/.stash-tagger/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Stash tagger - shape stash-box scene matches for review and submission."""
    ctx.ensure_object(dict)

    # Preserve a config injected by tests
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = get_config(config_path=config_path)
        except ConfigError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(ExitCode.CONFIG_ERROR)

    config = ctx.obj["config"]
    logging_config = replace(
        config.logging,
        level=log_level if log_level is not None else config.logging.level,
        file=log_file if log_file is not None else config.logging.file,
        format="json" if log_json else config.logging.format,
    )
    configure_logging(logging_config)
    logger.debug(
        "Tagger starting: close_match_seconds=%s, excluded_fields=%s",
        config.matching.close_match_seconds,
        list(config.performer.excluded_fields),
    )


def _register_commands():
    from stash_tagger.cli.normalize import normalize_command
    from stash_tagger.cli.paths import parse_path_command
    from stash_tagger.cli.profiles import profiles_group

    main.add_command(normalize_command)
    main.add_command(parse_path_command)
    main.add_command(profiles_group)


_register_commands()
