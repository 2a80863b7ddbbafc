"""Daily schedule for rating prompts."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo

from roadnoise.config.defaults import DEFAULT_REMINDER_HOURS
from roadnoise.config.schema import ReminderConfig


@dataclass(frozen=True)
class PromptSchedule:
    """Repeating local-time prompts at fixed hours of every day."""

    hours: tuple[int, ...] = tuple(DEFAULT_REMINDER_HOURS)
    minute: int = 0

    def __post_init__(self) -> None:
        if not self.hours:
            raise ValueError("schedule needs at least one hour")
        if any(not 0 <= h <= 23 for h in self.hours):
            raise ValueError(f"hours out of range 0-23: {self.hours}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute out of range 0-59: {self.minute}")
        object.__setattr__(self, "hours", tuple(sorted(set(self.hours))))

    @classmethod
    def from_config(cls, config: ReminderConfig) -> "PromptSchedule":
        return cls(hours=tuple(config.hours), minute=config.minute)

    def fire_times_on(self, day: date, tz: tzinfo | None = None) -> list[datetime]:
        """Wall-clock fire times on ``day`` in ``tz`` (system local if None).

        Each time gets the UTC offset in force on that day.
        """
        if tz is None:
            return [
                datetime.combine(day, time(h, self.minute)).astimezone()
                for h in self.hours
            ]
        return [
            datetime.combine(day, time(h, self.minute), tzinfo=tz)
            for h in self.hours
        ]

    def next_fire_after(self, now: datetime, tz: tzinfo | None = None) -> datetime:
        """First fire time strictly after ``now``.

        Fire times are wall-clock hours in ``tz``, or in the system local
        zone when ``tz`` is None, so a DST change in between does not shift
        the prompt off its hour. ``now`` may carry any offset.
        """
        now = now.astimezone(tz)
        today = now.date()
        for candidate in self.fire_times_on(today, tz):
            if candidate > now:
                return candidate
        return self.fire_times_on(today + timedelta(days=1), tz)[0]
