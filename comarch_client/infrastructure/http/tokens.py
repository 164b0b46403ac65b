"""Parsing of the provider's login responses into session tokens."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ValidationError
from requests import Response

from comarch_client.domain.models import SessionToken

from .errors import DecodeError


class AccessTokenPayload(BaseModel):
    """JSON body of a successful login response."""

    access_token: str
    token_type: str = ""
    expires_in: int


def parse_access_token(response: Response, now: datetime | None = None) -> SessionToken:
    """Build a :class:`SessionToken` from a login response.

    Every cookie set on the response is kept, without filtering.

    Raises:
        DecodeError: If the body is not JSON or lacks ``access_token`` or
            ``expires_in``.
    """
    try:
        payload = AccessTokenPayload.model_validate(response.json())
    except ValidationError as exc:
        # Validation messages echo input values, the token among them.
        raise DecodeError.from_validation_error("login response", exc) from None
    except ValueError as exc:
        raise DecodeError(f"Login response is not valid JSON: {exc}") from exc

    now = now or datetime.now(timezone.utc)
    return SessionToken(
        value=payload.access_token,
        expires_at=now + timedelta(seconds=payload.expires_in),
        cookies={cookie.name: cookie.value or "" for cookie in response.cookies},
    )


__all__ = ["AccessTokenPayload", "parse_access_token"]
