"""Observable holder of the current entry set and its day grouping."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import tzinfo

from roadnoise.grouping.index import GroupedIndex, build_grouped_index
from roadnoise.ingest.entry_client import EntryClient
from roadnoise.ingest.errors import EntryClientError
from roadnoise.models.entry import NoiseEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreSnapshot:
    entries: tuple[NoiseEntry, ...] = ()
    grouped: GroupedIndex = field(default_factory=GroupedIndex)


Observer = Callable[[StoreSnapshot], None]


class EntryStore:
    """Holds entries fetched from the endpoint and publishes every change.

    Entries and grouping are replaced together as one snapshot after the
    awaited network call returns, so observers only ever see a consistent
    pair. A refresh and a submit in flight at the same time are
    last-write-wins.
    """

    def __init__(self, client: EntryClient, tz: tzinfo | None = None):
        self.client = client
        self.tz = tz
        self._snapshot = StoreSnapshot()
        self._observers: list[Observer] = []

    @property
    def snapshot(self) -> StoreSnapshot:
        return self._snapshot

    @property
    def entries(self) -> tuple[NoiseEntry, ...]:
        return self._snapshot.entries

    @property
    def grouped(self) -> GroupedIndex:
        return self._snapshot.grouped

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer. Returns a callable that unsubscribes it."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    async def refresh(self) -> None:
        """Replace the entry set with the endpoint's history.

        Any client failure resets the set to empty. Observers are notified
        either way.
        """
        try:
            entries = await self.client.fetch_all()
        except EntryClientError:
            logger.exception("Failed to load entries, clearing history")
            entries = []
        self._apply(tuple(entries))

    async def submit(self, level: int) -> NoiseEntry | None:
        """Post a rating and prepend the created entry.

        Returns the new entry, or None when the submission failed, in which
        case state is left untouched and nothing is published.
        """
        try:
            entry = await self.client.post_entry(level)
        except EntryClientError:
            logger.exception("Failed to submit level %s", level)
            return None
        self._apply((entry, *self._snapshot.entries))
        return entry

    def _apply(self, entries: tuple[NoiseEntry, ...]) -> None:
        self._snapshot = StoreSnapshot(
            entries=entries,
            grouped=build_grouped_index(entries, self.tz),
        )
        self._publish()

    def _publish(self) -> None:
        snapshot = self._snapshot
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception:
                logger.exception("Store observer %r failed", observer)
