"""HTTP adapters for comarch-client.

This package provides the client for the provider's web service together with
its error types and login-response parsing.
"""

from .client import ComarchClient
from .errors import (
    BadResponseError,
    ComarchError,
    ConfigurationError,
    DecodeError,
    TransportError,
)
from .tokens import parse_access_token

__all__ = [
    "BadResponseError",
    "ComarchClient",
    "ComarchError",
    "ConfigurationError",
    "DecodeError",
    "TransportError",
    "parse_access_token",
]
