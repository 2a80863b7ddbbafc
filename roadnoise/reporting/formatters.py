"""Output formatters for grouped entry history."""

import json
from datetime import date, datetime, tzinfo

from roadnoise.grouping.index import GroupedIndex
from roadnoise.ingest.decoding import encode_entry
from roadnoise.models.entry import NoiseEntry
from roadnoise.models.weather import ConditionCategory

_WEATHER_SYMBOLS = {
    ConditionCategory.THUNDERSTORM.value: "cloud.bolt.rain.fill",
    ConditionCategory.DRIZZLE.value: "cloud.drizzle.fill",
    ConditionCategory.RAIN.value: "cloud.rain.fill",
    ConditionCategory.SNOW.value: "cloud.snow.fill",
    ConditionCategory.CLOUDS.value: "cloud.fill",
}
DEFAULT_WEATHER_SYMBOL = "sun.max.fill"


def weather_symbol(category: str) -> str:
    """Symbol name for a condition category; anything unlisted is sunny."""
    return _WEATHER_SYMBOLS.get(category, DEFAULT_WEATHER_SYMBOL)


def format_day(day: date) -> str:
    return f"{day:%B} {day.day}, {day.year}"


def format_time(dt: datetime, tz: tzinfo | None = None) -> str:
    local = dt.astimezone(tz)
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{local.hour % 12 or 12}:{local.minute:02d} {suffix}"


def format_entry_text(entry: NoiseEntry, tz: tzinfo | None = None) -> list[str]:
    w = entry.weather
    level = entry.noise_level
    return [
        f"  {format_time(entry.timestamp, tz):>8}  {weather_symbol(w.condition.category):<22}"
        f"{level.value} ({level.label})",
        f"      {round(w.temp)}°F  {round(w.wind.speed)} mph  "
        f"{w.humidity:g}%  {w.pressure:g} mbar",
    ]


def format_history_text(grouped: GroupedIndex, tz: tzinfo | None = None) -> str:
    """Plain text history, one section per day."""
    if not grouped:
        return "No entries."
    lines: list[str] = []
    for bucket in grouped:
        if lines:
            lines.append("")
        lines.append(format_day(bucket.day))
        for entry in bucket.entries:
            lines.extend(format_entry_text(entry, tz))
    return "\n".join(lines)


def format_history_json(grouped: GroupedIndex) -> str:
    """JSON history for programmatic consumption."""
    data = {
        "days": [
            {
                "day": bucket.day.isoformat(),
                "entries": [encode_entry(e) for e in bucket.entries],
            }
            for bucket in grouped
        ]
    }
    return json.dumps(data, indent=2)


def format_entry_line(entry: NoiseEntry, tz: tzinfo | None = None) -> str:
    """One-line summary of a newly recorded entry."""
    local = entry.timestamp.astimezone(tz)
    return (
        f"Recorded {entry.noise_level.value} ({entry.noise_level.label}) "
        f"on {format_day(local.date())} at {format_time(entry.timestamp, tz)}, "
        f"{round(entry.weather.temp)}°F {entry.weather.condition.description}"
    )
