"""Weather snapshot models recorded alongside each noise entry."""

from dataclasses import dataclass
from enum import StrEnum


class ConditionCategory(StrEnum):
    THUNDERSTORM = "Thunderstorm"
    DRIZZLE = "Drizzle"
    RAIN = "Rain"
    SNOW = "Snow"
    CLOUDS = "Clouds"
    CLEAR = "Clear"
    MIST = "Mist"
    FOG = "Fog"
    HAZE = "Haze"


@dataclass(frozen=True)
class Wind:
    speed: float  # mph
    deg: float


@dataclass(frozen=True)
class Rain:
    last_hour: float
    last_3_hours: float | None = None


@dataclass(frozen=True)
class Condition:
    category: str  # raw tag, usually a ConditionCategory value
    description: str


@dataclass(frozen=True)
class WeatherSnapshot:
    temp: float  # °F
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: float  # mbar
    humidity: float  # percent, 0-100
    clouds: float  # percent, 0-100
    wind: Wind
    condition: Condition
    rain: Rain | None = None
