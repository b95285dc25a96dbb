"""CLI parse-path command."""

import json
import logging

import click

from stash_tagger.cli.exit_codes import ExitCode
from stash_tagger.core.path_parser import parse_path
from stash_tagger.tagger.exceptions import EmptyPathError

logger = logging.getLogger(__name__)


@click.command("parse-path")
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)
@click.pass_context
def parse_path_command(
    ctx: click.Context, paths: tuple[str, ...], json_output: bool
) -> None:
    """Split file paths into grouping folders, base name and extension.

    Examples:

        stash-tagger parse-path "C:\\Shows\\Foo\\Bar\\scene.mp4"

        stash-tagger parse-path /media/a/b.mkv --json
    """
    results = []
    failed = False
    for path in paths:
        try:
            results.append({"path": path, **parse_path(path).as_dict()})
        except EmptyPathError as e:
            logger.error("%s", e, extra=e.log_context())
            results.append({"path": path, "error": str(e)})
            failed = True

    if json_output:
        click.echo(json.dumps(results, indent=2))
    else:
        for result in results:
            if "error" in result:
                click.echo(f"{result['path']}: error: {result['error']}")
                continue
            dirs = "/".join(result["directory_segments"]) or "-"
            click.echo(
                f"{result['path']}: dirs={dirs} "
                f"file={result['file_base_name']} ext={result['extension'] or '-'}"
            )

    ctx.exit(ExitCode.PARSE_ERROR if failed else ExitCode.SUCCESS)
