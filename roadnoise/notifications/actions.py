"""Rating prompt actions and their translation into store submissions."""

import logging
from dataclasses import dataclass
from enum import StrEnum

from roadnoise.models.entry import NoiseLevel
from roadnoise.store.entry_store import EntryStore

logger = logging.getLogger(__name__)


class ActionOutcome(StrEnum):
    SUBMITTED = "submitted"
    FAILED = "failed"
    PROMPT = "prompt"  # no level chosen; present the rating prompt
    CANCELLED = "cancelled"  # answered after a stop request; not submitted


@dataclass(frozen=True)
class PromptAction:
    identifier: str
    title: str


def prompt_actions() -> list[PromptAction]:
    """One action per level; the identifier is the level's raw value."""
    return [PromptAction(identifier=str(level.value), title=level.label) for level in NoiseLevel]


def parse_action(identifier: str | None) -> NoiseLevel | None:
    if identifier is None:
        return None
    try:
        return NoiseLevel(int(identifier.strip()))
    except ValueError:
        return None


async def handle_action(store: EntryStore, identifier: str | None) -> ActionOutcome:
    """Submit the level carried by a prompt action.

    Identifiers that are not a valid level (including the default
    "opened the prompt" action) ask the caller to present the prompt.
    """
    level = parse_action(identifier)
    if level is None:
        logger.debug("Action %r carries no level", identifier)
        return ActionOutcome.PROMPT
    entry = await store.submit(level)
    if entry is None:
        return ActionOutcome.FAILED
    return ActionOutcome.SUBMITTED
