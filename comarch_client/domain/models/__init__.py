"""Domain models package.

This package contains the value objects exchanged with the provider.
"""

from .balance import (
    DATETIME_FORMAT,
    BalanceInfo,
    BalanceInfoResponse,
    ExpressPoints,
    parse_provider_datetime,
)
from .cardholder import FavoriteCategory, MaritalStatus, PersonalData
from .session import GrantType, ServiceCredentials, SessionToken

__all__ = [
    "DATETIME_FORMAT",
    "BalanceInfo",
    "BalanceInfoResponse",
    "ExpressPoints",
    "FavoriteCategory",
    "GrantType",
    "MaritalStatus",
    "PersonalData",
    "ServiceCredentials",
    "SessionToken",
    "parse_provider_datetime",
]
