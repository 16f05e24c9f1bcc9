"""Pay period resolution.

A pay period runs from the pay day of one month to the pay day of the
next. The reference date decides which period is current: before this
month's pay day the period started last month.
"""

import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from .schemas import PlanConfig

logger = logging.getLogger(__name__)

SATURDAY = 6  # ISO weekday


def anchor_date(year: int, month: int, pay_day: int) -> date:
    """Pay day within a month, clamped to the month's last day."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(pay_day, last_day))


def _shift_month(year: int, month: int, delta: int):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def count_saturdays(start_date: date, total_days: int) -> int:
    """Count Saturdays strictly after start_date, up to total_days later."""
    count = 0
    for offset in range(1, total_days + 1):
        if (start_date + timedelta(days=offset)).isoweekday() == SATURDAY:
            count += 1
    return count


@dataclass(frozen=True)
class PlanningPeriod:
    """One pay period and its Saturday count."""

    start_date: date
    end_date: date
    total_days: int
    count_saturdays: int

    @property
    def weekday_count(self) -> int:
        return self.total_days - self.count_saturdays

    def days(self) -> List[date]:
        """Dates walked by the schedule, starting on start_date."""
        return [self.start_date + timedelta(days=i) for i in range(self.total_days)]

    def contains(self, day: date) -> bool:
        return self.start_date <= day < self.end_date

    def to_dict(self) -> dict:
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "total_days": self.total_days,
            "count_saturdays": self.count_saturdays,
            "weekday_count": self.weekday_count,
        }


def resolve_period(reference_date: date, config: Optional[PlanConfig] = None) -> PlanningPeriod:
    """Resolve the pay period containing reference_date.

    Args:
        reference_date: The "now" date (UTC) the period is anchored on.
        config: Plan configuration; defaults apply when omitted.

    Returns:
        PlanningPeriod starting on the most recent pay day.
    """
    config = config or PlanConfig()

    year, month = reference_date.year, reference_date.month
    if reference_date < anchor_date(year, month, config.pay_day):
        year, month = _shift_month(year, month, -1)

    start_date = anchor_date(year, month, config.pay_day)
    end_date = anchor_date(*_shift_month(year, month, 1), config.pay_day)
    total_days = (end_date - start_date).days

    period = PlanningPeriod(
        start_date=start_date,
        end_date=end_date,
        total_days=total_days,
        count_saturdays=count_saturdays(start_date, total_days),
    )
    logger.debug(
        f"period for {reference_date}: {period.start_date} -> {period.end_date} "
        f"({period.total_days} days, {period.count_saturdays} Saturdays)"
    )
    return period
