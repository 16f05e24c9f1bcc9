"""Tests for the day-by-day allowance schedule."""

from datetime import date, timedelta

import pytest

from allowance.sdk.budget import Budget
from allowance.sdk.period import resolve_period
from allowance.sdk.schedule import (
    DayRecord,
    build_schedule,
    format_schedule,
    prepend_days,
    today_utc,
)
from allowance.sdk.schemas import PlanConfig


DAY_KEYS = {
    "number", "remains", "budget", "date",
    "is_current", "is_saturday", "is_current_period",
}


# === FIXTURES ===


@pytest.fixture
def march_schedule():
    """Schedule for 2024-03-15: Feb 28 (Wednesday) to Mar 28, leap year."""
    return build_schedule(date(2024, 3, 15))


def real_days(schedule):
    return [d for d in schedule["days"] if d["is_current_period"]]


def stub_days(schedule):
    return [d for d in schedule["days"] if not d["is_current_period"]]


# === PAYLOAD ===


class TestPayload:
    """Top-level payload fields."""

    def test_summary_fields(self, march_schedule):
        assert march_schedule["daily_budget"] == 18
        assert march_schedule["total_days"] == 29
        assert march_schedule["remainer"] == 10

    def test_day_keys(self, march_schedule):
        for day in march_schedule["days"]:
            assert set(day) == DAY_KEYS

    def test_length_includes_stubs(self, march_schedule):
        # Wednesday start: isoweekday 3, so 4 stub days
        assert len(march_schedule["days"]) == 29 + 4


class TestRealDays:
    """Days belonging to the current period."""

    def test_numbering(self, march_schedule):
        numbers = [d["number"] for d in real_days(march_schedule)]
        assert numbers == list(range(1, 30))

    def test_first_days(self, march_schedule):
        days = real_days(march_schedule)
        assert days[0] == {
            "number": 1,
            "remains": 682,
            "budget": 18,
            "date": "28 Feb",
            "is_current": False,
            "is_saturday": False,
            "is_current_period": True,
        }
        assert days[1]["date"] == "29 Feb"
        assert days[2]["date"] == "01 Mar"

    def test_saturday(self, march_schedule):
        saturday = real_days(march_schedule)[3]
        assert saturday["date"] == "02 Mar"
        assert saturday["is_saturday"] is True
        assert saturday["budget"] == 60
        assert saturday["remains"] == 586

    def test_last_day_remains_remainer(self, march_schedule):
        last = real_days(march_schedule)[-1]
        assert last["date"] == "27 Mar"
        assert last["remains"] == march_schedule["remainer"]

    def test_exactly_one_current(self, march_schedule):
        current = [d for d in march_schedule["days"] if d["is_current"]]
        assert len(current) == 1
        assert current[0]["date"] == "15 Mar"
        assert current[0]["number"] == 17

    def test_no_current_outside_period(self):
        period = resolve_period(date(2024, 3, 15))
        budget = Budget(period.total_days, period.count_saturdays)

        schedule = format_schedule(budget, period, date(2024, 5, 1))

        assert not any(d["is_current"] for d in schedule["days"])

    def test_saturday_start_ends_below_remainer(self):
        schedule = build_schedule(date(2023, 11, 5))
        days = real_days(schedule)

        # 2023-10-28 is a Saturday. Saturdays are counted after the start
        # day (Nov 4, 11, 18, 25), but the walk starts on it, so five
        # Saturdays are spent against an allocation for four.
        assert days[0]["date"] == "28 Oct"
        assert days[0]["is_saturday"] is True
        assert schedule["daily_budget"] == 17
        assert schedule["remainer"] == 1
        # 700 - 5*60 - 26*17
        assert days[-1]["remains"] == -42


class TestStubDays:
    """Display-only days from the previous period."""

    def test_wednesday_start(self, march_schedule):
        stubs = stub_days(march_schedule)
        assert [d["date"] for d in stubs] == ["24 Feb", "25 Feb", "26 Feb", "27 Feb"]
        assert [d["number"] for d in stubs] == [24, 25, 26, 27]
        assert [d["is_saturday"] for d in stubs] == [True, False, False, False]

    def test_stubs_carry_no_budget(self, march_schedule):
        for stub in stub_days(march_schedule):
            assert stub["remains"] == 0
            assert stub["budget"] == 0
            assert stub["is_current"] is False

    def test_stubs_come_first(self, march_schedule):
        flags = [d["is_current_period"] for d in march_schedule["days"]]
        assert flags == [False] * 4 + [True] * 29

    def test_monday_start(self):
        # 2024-10-28 is a Monday
        stubs = prepend_days(date(2024, 10, 28), 28)
        assert [s.day for s in stubs] == [date(2024, 10, 26), date(2024, 10, 27)]
        assert [s.number for s in stubs] == [26, 27]

    def test_sunday_start(self):
        # 2024-04-28 is a Sunday: eight stubs back to the previous Saturday
        stubs = prepend_days(date(2024, 4, 28), 28)
        assert len(stubs) == 8
        assert stubs[0].day == date(2024, 4, 20)
        assert stubs[0].is_saturday is True
        assert stubs[-1].day == date(2024, 4, 27)
        assert stubs[-1].number == 27

    def test_numbers_follow_pay_day(self):
        stubs = prepend_days(date(2024, 2, 28), 10)
        assert [s.number for s in stubs] == [6, 7, 8, 9]

    def test_to_dict_drops_day(self):
        record = prepend_days(date(2024, 2, 28), 28)[0]
        assert isinstance(record, DayRecord)
        assert set(record.to_dict()) == DAY_KEYS


class TestOrdering:
    """Schedules are complete and strictly chronological."""

    @pytest.mark.parametrize("offset", range(0, 400, 9))
    def test_strictly_ascending(self, offset):
        reference = date(2024, 1, 1) + timedelta(days=offset)
        period = resolve_period(reference)
        budget = Budget(period.total_days, period.count_saturdays)

        schedule = format_schedule(budget, period, reference)
        days = schedule["days"]

        stub_count = period.start_date.isoweekday() + 1
        assert len(days) == period.total_days + stub_count
        assert sum(1 for d in days if d["is_current"]) == 1

        first = period.start_date - timedelta(days=stub_count)
        expected = [(first + timedelta(days=i)).strftime("%d %b") for i in range(len(days))]
        assert [d["date"] for d in days] == expected


class TestBuildSchedule:
    """End-to-end entry point."""

    def test_config_overrides(self):
        schedule = build_schedule(date(2024, 3, 15), PlanConfig(budget=900))
        assert schedule["daily_budget"] == 26
        assert schedule["remainer"] == 10

    def test_budget_argument(self):
        schedule = build_schedule(date(2024, 3, 15), budget=500)
        # (500 - 240) // 25
        assert schedule["daily_budget"] == 10
        assert schedule["remainer"] == 10

    def test_pay_day_renumbers_stubs(self):
        schedule = build_schedule(date(2024, 3, 15), PlanConfig(pay_day=10))
        period = resolve_period(date(2024, 3, 15), PlanConfig(pay_day=10))
        stubs = stub_days(schedule)
        assert period.start_date == date(2024, 3, 10)
        assert stubs[-1]["number"] == 9

    def test_defaults_to_today(self):
        schedule = build_schedule()
        current = [d for d in schedule["days"] if d["is_current"]]
        assert len(current) == 1
        assert current[0]["date"] == today_utc().strftime("%d %b")
