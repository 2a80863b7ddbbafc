"""Errors raised by the remote entry client."""


class EntryClientError(Exception):
    """Base class for entry endpoint failures."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(EntryClientError):
    """No connectivity, or the endpoint answered with a non-2xx status."""


class DecodeError(EntryClientError):
    """Response body did not match the expected entry shape."""


class AuthError(EntryClientError):
    """Write credential missing or rejected."""
