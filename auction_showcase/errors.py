"""Exception hierarchy shared by the loader, the API clients and the CLI."""

from __future__ import annotations


class ShowcaseError(RuntimeError):
    """Base class for every error that halts a showcase run."""


class ConfigError(ShowcaseError):
    """Raised when the configuration file is missing, malformed or incomplete."""


class NetworkError(ShowcaseError):
    """Raised when an HTTP call cannot be completed."""


class ResponseStatusError(NetworkError):
    """Raised when an HTTP call returns a non-2xx status."""

    def __init__(self, message: str, *, status_code: int, url: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DecodeError(ShowcaseError):
    """Raised when a response body is not the JSON we expect."""
