"""Decode entry endpoint JSON into models, and encode models back.

The decoder is strict about shape: every required field must be present with
the right JSON type, and timestamps must use the fixed wire format. Unknown
fields are ignored.
"""

from typing import Any

from roadnoise.ingest.errors import DecodeError
from roadnoise.models.common import format_timestamp, parse_timestamp
from roadnoise.models.entry import NoiseEntry, NoiseLevel
from roadnoise.models.weather import Condition, Rain, WeatherSnapshot, Wind


def decode_entries(payload: Any) -> list[NoiseEntry]:
    """Decode a JSON array of entries, preserving payload order."""
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array of entries, got {type(payload).__name__}")
    return [_decode_entry(raw, f"[{i}]") for i, raw in enumerate(payload)]


def decode_entry(payload: Any) -> NoiseEntry:
    """Decode a single JSON entry object."""
    return _decode_entry(payload, "entry")


def encode_entry(entry: NoiseEntry) -> dict:
    """Encode an entry using the endpoint's field names."""
    w = entry.weather
    weather: dict[str, Any] = {
        "temp": w.temp,
        "feelsLike": w.feels_like,
        "tempMin": w.temp_min,
        "tempMax": w.temp_max,
        "pressure": w.pressure,
        "humidity": w.humidity,
        "clouds": w.clouds,
        "wind": {"speed": w.wind.speed, "deg": w.wind.deg},
        "condition": {
            "category": w.condition.category,
            "description": w.condition.description,
        },
    }
    if w.rain is not None:
        rain: dict[str, float] = {"lastHour": w.rain.last_hour}
        if w.rain.last_3_hours is not None:
            rain["last3Hours"] = w.rain.last_3_hours
        weather["rain"] = rain
    return {
        "id": entry.id,
        "date": format_timestamp(entry.timestamp),
        "noiseLevel": int(entry.noise_level),
        "weather": weather,
    }


def _decode_entry(raw: Any, path: str) -> NoiseEntry:
    obj = _object(raw, path)
    date_str = _field(obj, "date", path)
    try:
        timestamp = parse_timestamp(date_str)
    except ValueError as e:
        raise DecodeError(f"{path}.date: {e}") from e

    level_raw = _field(obj, "noiseLevel", path)
    if isinstance(level_raw, bool) or not isinstance(level_raw, int):
        raise DecodeError(f"{path}.noiseLevel: expected integer, got {level_raw!r}")
    try:
        level = NoiseLevel(level_raw)
    except ValueError as e:
        raise DecodeError(f"{path}.noiseLevel: {level_raw} is not a valid level") from e

    return NoiseEntry(
        id=_string(obj, "id", path),
        timestamp=timestamp,
        noise_level=level,
        weather=_decode_weather(_field(obj, "weather", path), f"{path}.weather"),
    )


def _decode_weather(raw: Any, path: str) -> WeatherSnapshot:
    obj = _object(raw, path)
    wind = _object(_field(obj, "wind", path), f"{path}.wind")
    condition = _object(_field(obj, "condition", path), f"{path}.condition")

    rain: Rain | None = None
    rain_raw = obj.get("rain")
    if rain_raw is not None:
        rain_obj = _object(rain_raw, f"{path}.rain")
        last_3 = None
        if rain_obj.get("last3Hours") is not None:
            last_3 = _number(rain_obj, "last3Hours", f"{path}.rain")
        rain = Rain(
            last_hour=_number(rain_obj, "lastHour", f"{path}.rain"),
            last_3_hours=last_3,
        )

    return WeatherSnapshot(
        temp=_number(obj, "temp", path),
        feels_like=_number(obj, "feelsLike", path),
        temp_min=_number(obj, "tempMin", path),
        temp_max=_number(obj, "tempMax", path),
        pressure=_number(obj, "pressure", path),
        humidity=_number(obj, "humidity", path),
        clouds=_number(obj, "clouds", path),
        wind=Wind(
            speed=_number(wind, "speed", f"{path}.wind"),
            deg=_number(wind, "deg", f"{path}.wind"),
        ),
        condition=Condition(
            category=_string(condition, "category", f"{path}.condition"),
            description=_string(condition, "description", f"{path}.condition"),
        ),
        rain=rain,
    )


def _object(raw: Any, path: str) -> dict:
    if not isinstance(raw, dict):
        raise DecodeError(f"{path}: expected object, got {type(raw).__name__}")
    return raw


def _field(obj: dict, key: str, path: str) -> Any:
    if key not in obj or obj[key] is None:
        raise DecodeError(f"{path}: missing required field '{key}'")
    return obj[key]


def _number(obj: dict, key: str, path: str) -> float:
    value = _field(obj, key, path)
    # bool is an int subclass; JSON true/false is not a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{path}.{key}: expected number, got {value!r}")
    return float(value)


def _string(obj: dict, key: str, path: str) -> str:
    value = _field(obj, key, path)
    if not isinstance(value, str):
        raise DecodeError(f"{path}.{key}: expected string, got {value!r}")
    return value
