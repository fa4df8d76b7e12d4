"""Error types raised by the trace pipeline.

Every error carries a human-readable message suitable for showing
directly to the user. None of them are retried automatically.
"""

from __future__ import annotations


class TraceError(Exception):
    """Base class for all fpx-trace errors."""


class FetchError(TraceError):
    """Raised when the collector cannot be reached or answers with an error status.

    Attributes:
        url: The URL that was requested.
        reason: Description of the transport or status failure.
        status_code: HTTP status code if a response was received, else None.
    """

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")


class DecodeError(TraceError):
    """Raised when a collector response does not match the expected JSON shape.

    Attributes:
        url: The URL whose response could not be decoded.
        reason: Description of the parse or validation failure.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to parse JSON from {url}: {reason}")


class InvalidArgumentError(TraceError):
    """Raised when a command argument (usually the trace id) is missing or malformed."""


class SerializeError(TraceError):
    """Raised when a trace cannot be formatted as JSON."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to format JSON: {reason}")


class UnknownCommandError(TraceError):
    """Raised when the host invokes a slash command that is not registered.

    Attributes:
        name: The command name that was requested.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'unknown slash command: "{name}"')
