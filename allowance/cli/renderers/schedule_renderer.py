"""Rich renderer for allowance schedules.

Transforms SDK JSON output into formatted Rich tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table


def render_schedule(console: Console, data: dict) -> None:
    """Render a schedule as a summary panel followed by a day table.

    Args:
        console: Rich Console instance
        data: SDK output from build_schedule()
    """
    _render_summary(console, data)
    _render_days(console, data.get("days", []))


def render_period(console: Console, data: dict) -> None:
    """Render period bounds and allocation as a key/value panel."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    for key, value in data.items():
        table.add_row(key.replace("_", " ").title(), str(value))

    console.print(Panel(table, title="Pay Period", border_style="dim"))


def _render_summary(console: Console, data: dict) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    table.add_row("Total days", str(data.get("total_days", 0)))
    table.add_row("Daily budget", str(data.get("daily_budget", 0)))
    table.add_row("Remainder", str(data.get("remainer", 0)))

    console.print(Panel(table, title="Allowance", border_style="dim"))


def _render_days(console: Console, days: list) -> None:
    table = Table(box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Date")
    table.add_column("Budget", justify="right")
    table.add_column("Remains", justify="right")

    for day in days:
        if not day["is_current_period"]:
            table.add_row(str(day["number"]), day["date"], "", "", style="dim")
            continue

        style = None
        if day["is_current"]:
            style = "bold green"
        elif day["is_saturday"]:
            style = "cyan"

        remains = str(day["remains"])
        if day["remains"] < 0:
            remains = f"[red]{remains}[/red]"

        table.add_row(str(day["number"]), day["date"], str(day["budget"]), remains, style=style)

    console.print(table)
