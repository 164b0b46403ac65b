"""Session-related domain models: service credentials, grant types and tokens."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any


class GrantType(str, Enum):
    """Authentication modes accepted by the provider's login endpoint."""

    BY_CARD = "authbycard"
    BY_PHONE = "authbyphone"
    BY_SMS = "authbysms"
    CARD_ACTIVATION = "cardactivation"


@dataclass(frozen=True)
class ServiceCredentials:
    """Basic-auth credentials identifying this integration to the provider."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class SessionToken:
    """Access token and cookies returned by a successful sign-in.

    The token is a plain value: the client never refreshes or revokes it, and
    ``expires_at`` is informational. Callers decide when to sign in again.
    """

    value: str = field(repr=False)
    expires_at: datetime
    cookies: Mapping[str, str] = field(default_factory=dict, repr=False)

    def __repr__(self) -> str:
        return (
            f"SessionToken(value='***', expires_at={self.expires_at.isoformat()}, "
            f"cookies={sorted(self.cookies)})"
        )

    def expires_in(self, now: datetime | None = None) -> timedelta:
        now = now or datetime.now(timezone.utc)
        return self.expires_at - now

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.expires_in(now) <= timedelta(0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "expires_at": self.expires_at.isoformat(),
            "cookies": dict(self.cookies),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SessionToken":
        """Rebuild a token from the mapping produced by :meth:`to_dict`.

        Raises:
            KeyError: If ``value`` or ``expires_at`` is missing.
            ValueError: If ``expires_at`` is not an ISO-8601 timestamp.
        """
        expires_at = datetime.fromisoformat(payload["expires_at"])
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return cls(
            value=payload["value"],
            expires_at=expires_at,
            cookies=dict(payload.get("cookies") or {}),
        )
