"""
comarch-client package initializer.

This package provides a synchronous client for the Comarch loyalty-program web
service: sign-in by card or phone, balance lookups, password management and
card-holder registration.

The package exposes a ``__version__`` attribute indicating the installed
version. The version is read from pyproject.toml via importlib.metadata.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("comarch-client")
except PackageNotFoundError:
    # Package is not installed (running from source without pip install -e .)
    __version__ = "0.0.0.dev"

from comarch_client.domain.models import (
    BalanceInfo,
    BalanceInfoResponse,
    ExpressPoints,
    GrantType,
    PersonalData,
    ServiceCredentials,
    SessionToken,
)
from comarch_client.infrastructure.http import (
    BadResponseError,
    ComarchClient,
    ComarchError,
    ConfigurationError,
    DecodeError,
    TransportError,
)

__all__: list[str] = [
    "BadResponseError",
    "BalanceInfo",
    "BalanceInfoResponse",
    "ComarchClient",
    "ComarchError",
    "ConfigurationError",
    "DecodeError",
    "ExpressPoints",
    "GrantType",
    "PersonalData",
    "ServiceCredentials",
    "SessionToken",
    "TransportError",
    "__version__",
]
