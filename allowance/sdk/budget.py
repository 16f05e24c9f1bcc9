"""Budget allocation across a pay period.

Saturdays get a fixed allowance. Whatever is left is split evenly over
the remaining weekdays, rounding down; the leftover from that division
is the remainder.
"""

import logging
from datetime import date
from itertools import accumulate
from typing import Iterable, List, Optional

from .period import SATURDAY
from .schemas import BUDGET_DEFAULT, SATURDAY_BUDGET, PlanConfig

logger = logging.getLogger(__name__)


class DegeneratePeriodError(ValueError):
    """Raised when a period has no weekdays to spread the budget over."""
    pass


class Budget:
    """Daily allowance derived from a period's length and Saturday count.

    The allocation never changes after construction. Running balances are
    produced by folding decrement() over the days in chronological order.
    """

    def __init__(
        self,
        total_days: int,
        count_saturdays: int,
        budget: Optional[int] = None,
        config: Optional[PlanConfig] = None,
    ):
        self.config = config or PlanConfig()
        self.total_days = total_days
        self.count_saturdays = count_saturdays
        # 0 and None both mean "use the configured budget"
        self.budget = budget or self.config.budget

        weekdays = total_days - count_saturdays
        if weekdays <= 0:
            raise DegeneratePeriodError(
                f"Degenerate period, no weekdays: {total_days} day(s), "
                f"{count_saturdays} Saturday(s)"
            )

        spendable = self.budget - self.config.saturday_budget * count_saturdays
        self.daily_budget = spendable // weekdays
        self.remainer = max(0, spendable - weekdays * self.daily_budget)

        logger.debug(
            f"budget {self.budget}: daily {self.daily_budget} over {weekdays} weekday(s), "
            f"remainer {self.remainer}"
        )

    @property
    def saturday_budget(self) -> int:
        return self.config.saturday_budget

    def spend_for(self, day: date) -> int:
        """Allowance for a single day."""
        if day.isoweekday() == SATURDAY:
            return self.config.saturday_budget
        return self.daily_budget

    def decrement(self, balance: int, day: date) -> int:
        """Balance left after spending the allowance for day."""
        return balance - self.spend_for(day)

    def running_balances(self, days: Iterable[date]) -> List[int]:
        """Running balance after each day, starting from the full budget.

        Days must be given in chronological order, once each.
        """
        return list(accumulate(days, self.decrement, initial=self.budget))[1:]

    def to_dict(self) -> dict:
        return {
            "budget": self.budget,
            "daily_budget": self.daily_budget,
            "saturday_budget": self.config.saturday_budget,
            "remainer": self.remainer,
        }


def budget_remain(
    per_day: int,
    current_day_number: int,
    count_saturdays: int,
    budget: int = BUDGET_DEFAULT,
    saturday_budget: int = SATURDAY_BUDGET,
) -> int:
    """Budget left after current_day_number days, count_saturdays of them Saturdays."""
    saturdays_spent = count_saturdays * saturday_budget
    weekdays_spent = (current_day_number - count_saturdays) * per_day
    return budget - weekdays_spent - saturdays_spent
