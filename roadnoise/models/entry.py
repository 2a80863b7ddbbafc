"""Noise entry and rating models."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from roadnoise.models.common import EntryId
from roadnoise.models.weather import WeatherSnapshot


class NoiseLevel(IntEnum):
    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]


_LABELS = {
    NoiseLevel.ZERO: "What noise?",
    NoiseLevel.ONE: "It's fine",
    NoiseLevel.TWO: "Need headphones",
    NoiseLevel.THREE: "Just awful",
}

_COLORS = {
    NoiseLevel.ZERO: "green",
    NoiseLevel.ONE: "blue",
    NoiseLevel.TWO: "orange",
    NoiseLevel.THREE: "red",
}


@dataclass(frozen=True)
class NoiseEntry:
    id: EntryId
    timestamp: datetime  # aware, UTC, millisecond precision
    noise_level: NoiseLevel
    weather: WeatherSnapshot
