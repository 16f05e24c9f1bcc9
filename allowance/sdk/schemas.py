"""Pydantic schemas for allowance plan configuration.

Schemas use extra='forbid' to reject unknown fields, so a typo in
profile.yaml causes a clear error rather than being silently ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


# Defaults used when neither profile.yaml nor CLI options set a value
BUDGET_DEFAULT = 700
PAY_DAY = 28
SATURDAY_BUDGET = 60


class PlanConfig(BaseModel):
    """Spending plan for one pay period."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    budget: int = Field(
        default=BUDGET_DEFAULT, ge=0,
        description="Total funds available for the whole pay period",
    )
    pay_day: int = Field(
        default=PAY_DAY, ge=1, le=31,
        description=(
            "Day of month the pay period starts on. Months shorter than "
            "this day use their last day instead."
        ),
    )
    saturday_budget: int = Field(
        default=SATURDAY_BUDGET, ge=0,
        description="Fixed allowance for every Saturday in the period",
    )
