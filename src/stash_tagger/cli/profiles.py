"""CLI commands for tagging profile management."""

import json

import click

from stash_tagger.config.profiles import (
    ProfileError,
    get_profiles_directory,
    list_profiles,
    load_profile,
)


@click.group("profiles")
def profiles_group() -> None:
    """Manage tagging profiles."""
    pass


@profiles_group.command("list")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output in JSON format.",
)
def list_profiles_cmd(json_output: bool) -> None:
    """List available tagging profiles.

    Profiles are stored in ~/.stash-tagger/profiles/ as YAML files.
    """
    profiles_data = []
    for name in list_profiles():
        try:
            profile = load_profile(name)
            profiles_data.append(
                {
                    "name": profile.name,
                    "description": profile.description,
                    "excluded_fields": list(profile.excluded_fields or ()),
                    "close_match_seconds": profile.close_match_seconds,
                }
            )
        except ProfileError as e:
            profiles_data.append({"name": name, "error": str(e)})

    if json_output:
        click.echo(json.dumps(profiles_data, indent=2))
        return

    if not profiles_data:
        click.echo(f"No profiles found in {get_profiles_directory()}")
        click.echo("\nTo create a profile, add a YAML file to the profiles directory.")
        return

    click.echo(f"{'NAME':<15} {'DESCRIPTION':<40} {'EXCLUDED FIELDS':<30}")
    click.echo("-" * 85)
    for item in profiles_data:
        if "error" in item:
            description = f"(error: {item['error']})"
            excluded = "-"
        else:
            description = item["description"] or "-"
            excluded = ", ".join(item["excluded_fields"]) or "-"
        click.echo(f"{item['name']:<15} {description:<40} {excluded:<30}")
