"""Day-by-day allowance schedule.

Builds the payload consumed by the CLI and MCP server: one record per
day of the current pay period, preceded by a few display-only days from
the previous period so the first week lines up in a calendar grid.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from .budget import Budget
from .period import SATURDAY, PlanningPeriod, resolve_period
from .schemas import PlanConfig

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d %b"


@dataclass(frozen=True)
class DayRecord:
    """One calendar cell of the schedule."""

    number: int
    remains: int
    budget: int
    date: str
    is_current: bool
    is_saturday: bool
    is_current_period: bool = True
    day: Optional[date] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data.pop("day")
        return data


def today_utc() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def _assemble_days(budget: Budget, period: PlanningPeriod, reference_date: date) -> List[DayRecord]:
    days = period.days()
    balances = budget.running_balances(days)

    records = []
    for number, (day, remains) in enumerate(zip(days, balances), start=1):
        records.append(DayRecord(
            number=number,
            remains=remains,
            budget=budget.spend_for(day),
            date=day.strftime(DATE_FORMAT),
            is_current=day == reference_date,
            is_saturday=day.isoweekday() == SATURDAY,
            day=day,
        ))
    return records


def prepend_days(first_day: date, pay_day: int) -> List[DayRecord]:
    """Stub days from the previous period, oldest first.

    One more stub than first_day's ISO weekday number is produced. The
    stub just before first_day is numbered pay_day - 1 and numbers count
    down from there going back in time.
    """
    stubs = []
    for offset in range(1, first_day.isoweekday() + 2):
        day = first_day - timedelta(days=offset)
        stubs.append(DayRecord(
            number=pay_day - offset,
            remains=0,
            budget=0,
            date=day.strftime(DATE_FORMAT),
            is_current=False,
            is_saturday=day.isoweekday() == SATURDAY,
            is_current_period=False,
            day=day,
        ))
    stubs.reverse()
    return stubs


def format_schedule(
    budget: Budget,
    period: PlanningPeriod,
    reference_date: date,
    config: Optional[PlanConfig] = None,
) -> Dict[str, Any]:
    """Render a period and its allocation as the schedule payload.

    Args:
        budget: Allocation built from the period's day and Saturday counts.
        period: The period to walk.
        reference_date: Date flagged as is_current.
        config: Plan configuration; pay_day numbers the stub days.

    Returns:
        Dict with days, daily_budget, total_days and remainer.
    """
    config = config or budget.config

    days = prepend_days(period.start_date, config.pay_day)
    days.extend(_assemble_days(budget, period, reference_date))

    return {
        "days": [d.to_dict() for d in days],
        "daily_budget": budget.daily_budget,
        "total_days": period.total_days,
        "remainer": budget.remainer,
    }


def build_schedule(
    reference_date: Optional[date] = None,
    config: Optional[PlanConfig] = None,
    budget: Optional[int] = None,
) -> Dict[str, Any]:
    """Compute the schedule for the period containing reference_date.

    Args:
        reference_date: The "now" date. Read from the UTC clock when omitted.
        config: Plan configuration; defaults apply when omitted.
        budget: Optional total overriding config.budget.

    Returns:
        Schedule payload (see format_schedule).

    Raises:
        DegeneratePeriodError: If the period has no weekdays.
    """
    if reference_date is None:
        reference_date = today_utc()
    config = config or PlanConfig()

    period = resolve_period(reference_date, config)
    allocation = Budget(period.total_days, period.count_saturdays, budget=budget, config=config)
    return format_schedule(allocation, period, reference_date, config)
