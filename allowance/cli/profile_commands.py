"""Profile CLI commands for Pay Allowance.

Manages the spending plan stored in profile.yaml.
"""

import click
import yaml

from allowance.sdk import (
    get_profile_path,
    load_profile,
    save_profile,
    set_plan_value,
    load_plan_config,
    PlanConfig,
    PlanConfigError,
    ProfileNotFoundError,
)


@click.group()
def profile():
    """Manage the spending plan (profile.yaml)."""
    pass


@profile.command("show")
def profile_show():
    """Show the profile location and the effective plan."""
    path = get_profile_path()
    click.echo(f"Profile path: {path}")
    click.echo(f"File exists: {path.exists()}")

    try:
        config = load_plan_config()
    except (ProfileNotFoundError, PlanConfigError) as e:
        raise click.ClickException(str(e))

    click.echo()
    click.echo("Effective plan:")
    for key, value in config.model_dump().items():
        click.echo(f"  {key}: {value}")


@profile.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing profile.")
def profile_init(force):
    """Create profile.yaml with the default plan."""
    path = get_profile_path()
    if path.exists() and not force:
        raise click.ClickException(f"Profile already exists: {path} (use --force to overwrite)")

    saved = save_profile({"plan": PlanConfig().model_dump()}, path)
    click.echo(f"Created profile: {saved}")
    click.echo("---")
    click.echo(yaml.dump(load_profile(), default_flow_style=False, sort_keys=False))


@profile.command("set")
@click.argument("key", type=click.Choice(sorted(PlanConfig.model_fields)))
@click.argument("value", type=int)
def profile_set(key, value):
    """Set a plan value, e.g. `allowance profile set budget 900`."""
    try:
        path = set_plan_value(key, value)
    except PlanConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set plan.{key} = {value}")
    click.echo(f"Saved to: {path}")
