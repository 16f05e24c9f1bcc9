"""Pay Allowance SDK - Core functionality for the allowance schedule."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_profile_path,
    load_profile,
    save_profile,
    set_plan_value,
    load_plan_config,
    ProfileNotFoundError,
    PlanConfigError,
)

from .schemas import (
    PlanConfig,
    BUDGET_DEFAULT,
    PAY_DAY,
    SATURDAY_BUDGET,
)

from .period import (
    PlanningPeriod,
    resolve_period,
    count_saturdays,
)

from .budget import (
    Budget,
    DegeneratePeriodError,
    budget_remain,
)

from .schedule import (
    DayRecord,
    build_schedule,
    format_schedule,
    prepend_days,
    today_utc,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "set_plan_value",
    "load_plan_config",
    "ProfileNotFoundError",
    "PlanConfigError",
    # Schemas
    "PlanConfig",
    "BUDGET_DEFAULT",
    "PAY_DAY",
    "SATURDAY_BUDGET",
    # Period
    "PlanningPeriod",
    "resolve_period",
    "count_saturdays",
    # Budget
    "Budget",
    "DegeneratePeriodError",
    "budget_remain",
    # Schedule
    "DayRecord",
    "build_schedule",
    "format_schedule",
    "prepend_days",
    "today_utc",
]
