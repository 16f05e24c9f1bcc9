"""Pay Allowance MCP Server - FastMCP implementation for allowance tools."""

import logging
from datetime import datetime
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from allowance.sdk import (
    Budget,
    build_schedule,
    load_plan_config,
    resolve_period,
    today_utc,
)

logger = logging.getLogger(__name__)

mcp = FastMCP("allowance")


def _reference_date(value):
    # Direct calls without a date see the Field default, not None
    if not isinstance(value, str) or not value:
        return today_utc()
    return datetime.strptime(value, "%Y-%m-%d").date()


# --- Tools ---

@mcp.tool()
async def get_schedule(
    date: str | None = Field(default=None, description="Reference date YYYY-MM-DD (default: today, UTC)"),
) -> dict[str, Any]:
    """Day-by-day allowance for the pay period containing the date, with running balance."""
    try:
        return build_schedule(_reference_date(date), load_plan_config())
    except Exception as e:
        logger.error(f"Error building schedule: {e}")
        return {"error": str(e)}


@mcp.tool()
async def get_period(
    date: str | None = Field(default=None, description="Reference date YYYY-MM-DD (default: today, UTC)"),
) -> dict[str, Any]:
    """Start/end dates, day and Saturday counts and daily budget of the pay period."""
    try:
        config = load_plan_config()
        period = resolve_period(_reference_date(date), config)
        result = period.to_dict()
        result.update(Budget(period.total_days, period.count_saturdays, config=config).to_dict())
        return result
    except Exception as e:
        logger.error(f"Error resolving period: {e}")
        return {"error": str(e)}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
