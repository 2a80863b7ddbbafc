"""Reminder daemon: prompts for a rating at the scheduled hours.

Usage:
    python -m roadnoise remind          # run until stopped
    python -m roadnoise remind --once   # wait for the next prompt, then exit
"""

import asyncio
import logging
import signal
from collections.abc import Callable
from datetime import UTC, datetime, tzinfo
from pathlib import Path

from roadnoise.config.defaults import DEFAULT_REMINDER_TITLE
from roadnoise.notifications.actions import (
    ActionOutcome,
    PromptAction,
    handle_action,
    prompt_actions,
)
from roadnoise.notifications.schedule import PromptSchedule
from roadnoise.store.entry_store import EntryStore

logger = logging.getLogger(__name__)

# Receives the title and actions, returns the chosen action identifier or None.
PromptCallback = Callable[[str, list[PromptAction]], str | None]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ReminderDaemon:
    """Sleeps until each scheduled hour, prompts, and submits the answer."""

    def __init__(
        self,
        store: EntryStore,
        schedule: PromptSchedule,
        prompt: PromptCallback,
        title: str = DEFAULT_REMINDER_TITLE,
        tz: tzinfo | None = None,
        clock: Callable[[], datetime] = _utc_now,
        log_file: Path | None = None,
    ):
        self.store = store
        self.schedule = schedule
        self.prompt = prompt
        self.title = title
        self.tz = tz
        self.clock = clock
        self.log_file = log_file
        self._running = False
        self._stop_requested = False
        self._total_prompts = 0
        self._total_submitted = 0
        self._total_failed = 0

    @property
    def stats(self) -> dict[str, int]:
        return {
            "prompts": self._total_prompts,
            "submitted": self._total_submitted,
            "failed": self._total_failed,
        }

    async def run(self, once: bool = False) -> None:
        """Run the prompt loop until stopped, or after one prompt if ``once``."""
        self._setup_signals()
        handler = self._attach_log_file()
        self._running = True
        self._stop_requested = False
        logger.info("Reminder daemon started, hours=%s", list(self.schedule.hours))
        try:
            while self._running:
                fire_at = self.schedule.next_fire_after(self.clock(), self.tz)
                logger.info("Next prompt at %s", fire_at.isoformat())
                await self._sleep_until(fire_at)
                if not self._running:
                    break
                await self.fire()
                if once:
                    break
        finally:
            self._running = False
            if handler is not None:
                logging.getLogger().removeHandler(handler)
                handler.close()
            logger.info(
                "Reminder daemon stopped: %d prompts (%d submitted, %d failed)",
                self._total_prompts, self._total_submitted, self._total_failed,
            )

    def stop(self) -> None:
        self._running = False
        self._stop_requested = True

    async def fire(self) -> ActionOutcome:
        """Deliver one prompt and route the answer."""
        self._total_prompts += 1
        answer = self._ask()
        if self._stop_requested:
            logger.info("Stop requested while prompting, discarding answer %r", answer)
            return ActionOutcome.CANCELLED
        outcome = await handle_action(self.store, answer)
        if outcome == ActionOutcome.SUBMITTED:
            self._total_submitted += 1
        elif outcome == ActionOutcome.FAILED:
            self._total_failed += 1
        else:
            logger.info("Prompt dismissed without a level")
        return outcome

    def _ask(self) -> str | None:
        # Runs on the main thread; Ctrl-C raises KeyboardInterrupt while waiting
        # for an answer.
        previous = signal.getsignal(signal.SIGINT)
        signal.signal(signal.SIGINT, signal.default_int_handler)
        try:
            return self.prompt(self.title, prompt_actions())
        finally:
            if previous is not None:
                signal.signal(signal.SIGINT, previous)

    async def _sleep_until(self, when: datetime) -> None:
        # Sleep in short increments so stop() and signals are honoured
        while self._running:
            remaining = (when - self.clock()).total_seconds()
            if remaining <= 0:
                return
            await asyncio.sleep(min(1.0, remaining))

    def _attach_log_file(self) -> logging.Handler | None:
        if self.log_file is None:
            return None
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(self.log_file)
        handler.setLevel(logging.INFO)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logging.getLogger().addHandler(handler)
        return handler

    def _setup_signals(self) -> None:
        """Handle SIGTERM and SIGINT for graceful shutdown."""
        def _stop(signum: int, frame: object) -> None:
            logger.info("Received %s, shutting down", signal.Signals(signum).name)
            self.stop()

        signal.signal(signal.SIGTERM, _stop)
        signal.signal(signal.SIGINT, _stop)
