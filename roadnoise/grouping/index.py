"""Calendar-day grouping of noise entries."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, tzinfo

from roadnoise.models.entry import NoiseEntry


@dataclass(frozen=True)
class DayBucket:
    day: date
    entries: tuple[NoiseEntry, ...]


@dataclass(frozen=True)
class GroupedIndex:
    """Entries partitioned by local calendar day, most recent day first."""

    buckets: tuple[DayBucket, ...] = ()

    def __iter__(self) -> Iterator[DayBucket]:
        return iter(self.buckets)

    def __len__(self) -> int:
        return len(self.buckets)

    def days(self) -> list[date]:
        return [b.day for b in self.buckets]

    def get(self, day: date) -> tuple[NoiseEntry, ...]:
        for bucket in self.buckets:
            if bucket.day == day:
                return bucket.entries
        return ()

    def entries(self) -> list[NoiseEntry]:
        return [e for b in self.buckets for e in b.entries]

    def as_dict(self) -> dict[date, list[NoiseEntry]]:
        return {b.day: list(b.entries) for b in self.buckets}


def local_day(entry: NoiseEntry, tz: tzinfo | None = None) -> date:
    """Calendar day of an entry in ``tz``, or the process's local zone."""
    return entry.timestamp.astimezone(tz).date()


def build_grouped_index(
    entries: Iterable[NoiseEntry], tz: tzinfo | None = None
) -> GroupedIndex:
    """Bucket entries by local calendar day.

    Input order is kept inside each bucket; buckets are sorted by day
    descending. Always a full rebuild.
    """
    grouped: dict[date, list[NoiseEntry]] = {}
    for entry in entries:
        grouped.setdefault(local_day(entry, tz), []).append(entry)
    buckets = tuple(
        DayBucket(day=day, entries=tuple(grouped[day]))
        for day in sorted(grouped, reverse=True)
    )
    return GroupedIndex(buckets=buckets)
