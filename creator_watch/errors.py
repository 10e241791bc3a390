"""Error kinds shared by collector, registrar and CLI. Every kind is fatal to the run."""

from __future__ import annotations


class CreatorWatchError(Exception):
    """Base for all expected failures; the CLI maps any of these to a non-zero exit."""

    kind = "Error"


class TransportError(CreatorWatchError):
    """Non-success HTTP status or network failure (status_code is None for the latter)."""

    kind = "TransportError"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(CreatorWatchError):
    """Response body is missing the expected envelope or fields."""

    kind = "ProtocolError"


class FileError(CreatorWatchError):
    """Persisted address file is absent, unreadable or malformed."""

    kind = "FileError"

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(CreatorWatchError):
    """Required configuration is missing or invalid."""

    kind = "ConfigError"
