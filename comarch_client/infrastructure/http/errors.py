"""Exceptions raised by the Comarch HTTP client."""

from __future__ import annotations

import requests
from pydantic import ValidationError


class ComarchError(Exception):
    """Base class for errors raised by comarch-client itself."""


class ConfigurationError(ComarchError, ValueError):
    """Raised when the client is configured with unusable settings."""


class BadResponseError(ComarchError):
    """Raised when the provider answers with a status other than 200.

    The response body is not inspected; only the status code is kept.
    """

    def __init__(self, status_code: int, message: str = "Invalid server response") -> None:
        super().__init__(f"{message} (status {status_code})")
        self.status_code = status_code


class DecodeError(ComarchError, ValueError):
    """Raised when a response body is not JSON of the expected shape."""

    @classmethod
    def from_validation_error(cls, what: str, exc: ValidationError) -> "DecodeError":
        """Describe which fields failed without echoing their values."""
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) or "<root>"
            for error in exc.errors()
        )
        return cls(f"Unexpected {what} shape: invalid or missing {fields}")


# Network and timeout failures come straight from requests, unwrapped.
TransportError = requests.RequestException


__all__ = [
    "BadResponseError",
    "ComarchError",
    "ConfigurationError",
    "DecodeError",
    "TransportError",
]
