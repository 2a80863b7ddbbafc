"""Tests for the daily prompt schedule."""

import os
import time
from datetime import UTC, date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from roadnoise.config.schema import ReminderConfig
from roadnoise.notifications.schedule import PromptSchedule

NEW_YORK = ZoneInfo("America/New_York")


@pytest.fixture
def new_york_local():
    """Run with America/New_York as the process's local zone."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available")
    old = os.environ.get("TZ")
    os.environ["TZ"] = "America/New_York"
    time.tzset()
    yield
    if old is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = old
    time.tzset()


class TestPromptSchedule:
    def test_default_hours(self):
        assert PromptSchedule().hours == (7, 13, 21)

    def test_next_same_day(self):
        now = datetime(2024, 1, 2, 8, 30, tzinfo=UTC)
        assert PromptSchedule().next_fire_after(now, UTC) == datetime(2024, 1, 2, 13, 0, tzinfo=UTC)

    def test_exact_fire_time_moves_on(self):
        now = datetime(2024, 1, 2, 13, 0, tzinfo=UTC)
        assert PromptSchedule().next_fire_after(now, UTC) == datetime(2024, 1, 2, 21, 0, tzinfo=UTC)

    def test_rolls_over_to_next_day(self):
        now = datetime(2024, 1, 2, 21, 0, 1, tzinfo=UTC)
        assert PromptSchedule().next_fire_after(now, UTC) == datetime(2024, 1, 3, 7, 0, tzinfo=UTC)

    def test_rolls_over_month_end(self):
        now = datetime(2024, 1, 31, 23, 0, tzinfo=UTC)
        assert PromptSchedule().next_fire_after(now, UTC) == datetime(2024, 2, 1, 7, 0, tzinfo=UTC)

    def test_uses_given_zone(self):
        tz = ZoneInfo("America/Chicago")
        now = datetime(2024, 7, 4, 11, 0, tzinfo=UTC)  # 06:00 in Chicago
        fire = PromptSchedule().next_fire_after(now, tz)
        assert fire.tzinfo is tz
        assert (fire.date(), fire.hour, fire.minute) == (date(2024, 7, 4), 7, 0)

    def test_spring_forward_keeps_wall_clock_hour(self):
        # 22:00 EST, clocks go forward at 02:00 the next morning
        now = datetime(2024, 3, 9, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
        fire = PromptSchedule().next_fire_after(now, NEW_YORK)
        assert (fire.date(), fire.hour) == (date(2024, 3, 10), 7)
        assert fire.astimezone(UTC) == datetime(2024, 3, 10, 11, 0, tzinfo=UTC)

    def test_fall_back_keeps_wall_clock_hour(self):
        now = datetime(2024, 11, 2, 22, 0, tzinfo=NEW_YORK)
        fire = PromptSchedule().next_fire_after(now, NEW_YORK)
        assert fire.astimezone(UTC) == datetime(2024, 11, 3, 12, 0, tzinfo=UTC)

    def test_system_local_zone_across_dst(self, new_york_local):
        now = datetime(2024, 3, 9, 22, 0).astimezone()
        fire = PromptSchedule().next_fire_after(now)
        assert fire.hour == 7
        assert fire.utcoffset() == timedelta(hours=-4)

    def test_custom_schedule(self):
        schedule = PromptSchedule(hours=(18, 8, 8), minute=15)
        assert schedule.hours == (8, 18)
        now = datetime(2024, 1, 2, 9, 0, tzinfo=UTC)
        assert schedule.next_fire_after(now, UTC) == datetime(2024, 1, 2, 18, 15, tzinfo=UTC)

    def test_fire_times_on(self):
        times = PromptSchedule(hours=(9, 17)).fire_times_on(date(2024, 1, 2), UTC)
        assert times == [
            datetime(2024, 1, 2, 9, 0, tzinfo=UTC),
            datetime(2024, 1, 2, 17, 0, tzinfo=UTC),
        ]

    def test_from_config(self):
        schedule = PromptSchedule.from_config(ReminderConfig(hours=[22, 6], minute=30))
        assert schedule.hours == (6, 22)
        assert schedule.minute == 30

    @pytest.mark.parametrize("kwargs", [{"hours": ()}, {"hours": (24,)}, {"minute": 60}])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            PromptSchedule(**kwargs)
