"""Settings CLI commands for Pay Allowance.

Manages settings.json - profile location and output preferences.
"""

from pathlib import Path

import click

from allowance.sdk import (
    load_settings,
    save_settings,
    set_setting,
    get_settings_path,
    get_profile_path,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - profile: path to profile.yaml
    - default_output_format: text or json
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective paths:")
    click.echo(f"  profile: {get_profile_path()}")


@settings.command("set-profile")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def settings_set_profile(path):
    """Use the profile.yaml at PATH instead of the one in the config directory."""
    profile_path = Path(path).expanduser().resolve()
    if profile_path.suffix not in (".yaml", ".yml"):
        raise click.ClickException(f"Profile must be a YAML file: {profile_path}")

    set_setting("profile", str(profile_path))
    click.echo(f"Set profile: {profile_path}")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("clear-profile")
def settings_clear_profile():
    """Revert to profile.yaml in the config directory."""
    current = load_settings()
    if "profile" not in current:
        click.echo("profile was not set.")
        return

    del current["profile"]
    save_settings(current)
    click.echo("Cleared profile setting.")
    click.echo(f"Profile is now: {get_profile_path()} (default)")


@settings.command("output-format")
@click.argument("output_format", type=click.Choice(["text", "json"]))
def settings_output_format(output_format):
    """Set the default output format for the schedule command."""
    set_setting("default_output_format", output_format)
    click.echo(f"Set default_output_format: {output_format}")
