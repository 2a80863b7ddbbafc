"""Pydantic v2 configuration schema with strict validation."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from roadnoise.config.defaults import (
    DEFAULT_BASE_URL,
    DEFAULT_REMINDER_HOURS,
    DEFAULT_REMINDER_TITLE,
    DEFAULT_USER_AGENT,
)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    # None leaves httpx's own default timeout in place
    timeout_seconds: float | None = Field(default=None, gt=0.0)


class ReminderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    enabled: bool = True
    hours: list[int] = Field(default_factory=lambda: list(DEFAULT_REMINDER_HOURS))
    minute: int = Field(default=0, ge=0, le=59)
    title: str = DEFAULT_REMINDER_TITLE

    @field_validator("hours")
    @classmethod
    def _check_hours(cls, v: list[int]) -> list[int]:
        if not v:
            raise ValueError("at least one reminder hour is required")
        for h in v:
            if not 0 <= h <= 23:
                raise ValueError(f"reminder hour {h} out of range 0-23")
        return sorted(set(v))


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # IANA zone used for day grouping; None means the system local zone
    timezone: str | None = None

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone {v!r}") from e
        return v

    def tzinfo(self) -> ZoneInfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None


class RoadNoiseConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    reminders: ReminderConfig = ReminderConfig()
    display: DisplayConfig = DisplayConfig()
