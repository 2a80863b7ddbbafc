"""Common types and helpers shared across models."""

import re
from datetime import UTC, datetime
from typing import TypeAlias

EntryId: TypeAlias = str

# Wire format: yyyy-MM-dd'T'HH:mm:ss.SSS'Z', always UTC, always milliseconds.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{3}Z")


def parse_timestamp(value: str) -> datetime:
    """Parse a wire timestamp into an aware UTC datetime.

    Only the exact millisecond ``Z`` form is accepted; offsets, missing
    fractions and other ISO variants raise ValueError.
    """
    if not isinstance(value, str) or _TIMESTAMP_RE.fullmatch(value) is None:
        raise ValueError(f"Unsupported timestamp format: {value!r}")
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=UTC)


def format_timestamp(dt: datetime) -> str:
    """Format a datetime in the wire format, truncating to milliseconds."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    dt = dt.astimezone(UTC)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
