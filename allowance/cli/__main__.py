"""Pay Allowance CLI - Command-line interface for the allowance schedule."""

import json
import logging
from datetime import datetime

import click
from rich.console import Console

from allowance import __version__
from allowance.sdk import (
    Budget,
    DegeneratePeriodError,
    PlanConfigError,
    ProfileNotFoundError,
    budget_remain,
    build_schedule,
    get_setting,
    load_plan_config,
    resolve_period,
    today_utc,
)

from .profile_commands import profile as profile_group
from .renderers.schedule_renderer import render_period, render_schedule
from .settings_commands import settings as settings_group


def _parse_date(ctx, param, value):
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"Invalid date '{value}'. Use YYYY-MM-DD.")


def _plan_config(budget=None, pay_day=None, saturday_budget=None):
    try:
        return load_plan_config({
            "budget": budget,
            "pay_day": pay_day,
            "saturday_budget": saturday_budget,
        })
    except (ProfileNotFoundError, PlanConfigError) as e:
        raise click.ClickException(str(e))


def plan_options(f):
    """Options overriding the plan values from profile.yaml."""
    f = click.option("--saturday-budget", type=int, help="Allowance for each Saturday.")(f)
    f = click.option("--pay-day", type=int, help="Day of month the pay period starts.")(f)
    f = click.option("--budget", "-b", type=int, help="Total funds for the period.")(f)
    f = click.option("--date", "-d", "reference_date", callback=_parse_date,
                     help="Reference date (YYYY-MM-DD). Defaults to today in UTC.")(f)
    return f


@click.group()
@click.version_option(version=__version__, prog_name="allowance")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose):
    """Pay Allowance - daily spending allowance across a pay period.

    The plan (budget, pay day, Saturday allowance) is loaded from (in order):

    \b
    1. command-line options
    2. the `plan` section of profile.yaml
    3. built-in defaults (700 / 28 / 60)

    Run 'allowance profile show' to see the effective plan.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(profile_group)
cli.add_command(settings_group)


@cli.command("schedule")
@plan_options
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default=None, help="Output format (default from settings, else text).")
def schedule(reference_date, budget, pay_day, saturday_budget, output_format):
    """Show the day-by-day allowance for the current pay period.

    \b
    Examples:
      allowance schedule
      allowance schedule --date 2024-03-15 --format json
      allowance schedule --budget 900 --saturday-budget 80
    """
    config = _plan_config(budget, pay_day, saturday_budget)
    output_format = output_format or get_setting("default_output_format", "text")

    try:
        data = build_schedule(reference_date or today_utc(), config)
    except DegeneratePeriodError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(data, indent=2))
    else:
        render_schedule(Console(), data)


@cli.command("period")
@plan_options
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def period(reference_date, budget, pay_day, saturday_budget, output_json):
    """Show the bounds and allocation of the current pay period."""
    config = _plan_config(budget, pay_day, saturday_budget)

    resolved = resolve_period(reference_date or today_utc(), config)
    data = resolved.to_dict()
    try:
        data.update(Budget(resolved.total_days, resolved.count_saturdays, config=config).to_dict())
    except DegeneratePeriodError as e:
        raise click.ClickException(str(e))

    if output_json:
        click.echo(json.dumps(data, indent=2))
    else:
        render_period(Console(), data)


@cli.command("remain")
@click.argument("per_day", type=int)
@click.argument("day_number", type=int)
@click.argument("saturdays", type=int)
@click.option("--budget", "-b", type=int, help="Total funds (default from plan).")
def remain(per_day, day_number, saturdays, budget):
    """Budget left after DAY_NUMBER days, SATURDAYS of them Saturdays.

    \b
    Example:
      allowance remain 20 10 2     # 700 - 8*20 - 2*60 = 420
    """
    config = _plan_config(budget=budget)
    left = budget_remain(
        per_day, day_number, saturdays,
        budget=config.budget,
        saturday_budget=config.saturday_budget,
    )
    click.echo(left)


def main():
    cli()


if __name__ == "__main__":
    main()
