"""HTTP client for the Comarch loyalty-program web service.

This module centralises access to the provider's ``cwaapiinterface`` API. Each
public method performs exactly one request: login calls authenticate with the
integration's basic-auth credentials and return a :class:`SessionToken`;
resource calls re-attach that token as a bearer header together with the
cookies the provider set at login.

The client keeps no per-user state. Tokens are plain values owned by the
caller, who is also responsible for retries and for signing in again once a
token has expired.
"""

from __future__ import annotations

import logging
from http.cookiejar import DefaultCookiePolicy
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from requests import PreparedRequest, Request, Response, Session
from requests.auth import AuthBase, HTTPBasicAuth

from comarch_client.domain.models import (
    BalanceInfoResponse,
    GrantType,
    PersonalData,
    ServiceCredentials,
    SessionToken,
)
from comarch_client.infrastructure.observability.logging import get_logger, log_context

from .dump import dump_request, dump_response
from .errors import BadResponseError, ConfigurationError, DecodeError
from .tokens import parse_access_token

LOGIN_PATH = "/cwaapiinterface/login"
PASSWORD_RESET_PATH = "/cwaapiinterface/common/passresetting"
BALANCE_INFO_PATH = "/cwaapiinterface/resources/balanceinfo"
CARD_PASSWORD_PATH = "/cwaapiinterface/resources/cards/password"
CARD_HOLDERS_PATH = "/cwaapiinterface/resources/cardholders"
LOGOUT_PATH = "/cwaapiinterface/logout"

ModelT = TypeVar("ModelT", bound=BaseModel)


class BearerAuth(AuthBase):
    """Attaches a session token as an ``Authorization: Bearer`` header.

    Passing it as ``auth`` also keeps requests from substituting netrc
    credentials for the header.
    """

    def __init__(self, token: SessionToken) -> None:
        self.token = token

    def __call__(self, request: PreparedRequest) -> PreparedRequest:
        request.headers["Authorization"] = f"Bearer {self.token.value}"
        return request


def _default_session() -> Session:
    """Return a session whose cookie jar never stores response cookies.

    Cookies belong to the end user's :class:`SessionToken`; a shared jar
    would leak them into requests made on behalf of other users.
    """
    session = requests.Session()
    session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
    return session


class ComarchClient:
    """Stateless request builder for the provider's API."""

    def __init__(
        self,
        base_path: str,
        username: str,
        password: str,
        *,
        session: Session | None = None,
        logger: logging.Logger | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Args:
            base_path: Scheme and host of the provider, e.g.
                ``https://loyalty.example.com``. Endpoint paths are appended
                verbatim, so it must not end with ``/``.
            username: Basic-auth user of this integration.
            password: Basic-auth password of this integration.
            session: Transport to send requests with. A private session is
                created when omitted.
            logger: Logger for debug output; defaults to this module's logger.
            timeout: Passed unchanged to every request; ``None`` waits forever.

        Raises:
            ConfigurationError: If ``base_path`` ends with ``/``.
        """
        if base_path.endswith("/"):
            raise ConfigurationError("Invalid configuration: base path must not end with '/'")

        self.base_path = base_path
        self.credentials = ServiceCredentials(username, password)
        self.timeout = timeout
        self.logger = logger or get_logger(__name__)
        self._owns_session = session is None
        self.session = session or _default_session()

    def close(self) -> None:
        """Close the transport if it was created by this client."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ComarchClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -------------------- request helpers --------------------
    def _prepare_headers(self) -> dict[str, str]:
        from comarch_client import __version__

        return {"User-Agent": f"comarch-client/{__version__}"}

    def _send(
        self,
        method: str,
        path: str,
        *,
        token: SessionToken | None = None,
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> Response:
        """Send one request; the caller must close the returned response.

        Requests without a token carry the integration's basic auth, requests
        with a token carry its bearer header and every one of its cookies.
        """
        request = Request(
            method,
            self.base_path + path,
            headers=self._prepare_headers(),
            params=params,
            json=json,
            cookies=dict(token.cookies) if token is not None else None,
            auth=(
                HTTPBasicAuth(self.credentials.username, self.credentials.password)
                if token is None
                else BearerAuth(token)
            ),
        )
        prepared = self.session.prepare_request(request)
        response = self.session.send(prepared, timeout=self.timeout)
        self.logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    def _check_status(self, response: Response) -> None:
        if response.status_code != 200:
            request = response.request
            self.logger.warning(
                f"Provider rejected {request.method} {request.path_url.split('?')[0]} "
                f"with status {response.status_code}"
            )
            raise BadResponseError(response.status_code)

    def _decode(self, response: Response, model: type[ModelT], what: str) -> ModelT:
        try:
            return model.model_validate(response.json())
        except ValidationError as exc:
            raise DecodeError.from_validation_error(what, exc) from None
        except ValueError as exc:
            raise DecodeError(f"{what} is not valid JSON: {exc}") from exc

    # -------------------- authentication --------------------
    def _sign_in(self, grant_type: GrantType, **identity: str) -> SessionToken:
        params = {"grant_type": grant_type.value, **identity}
        with self._send("POST", LOGIN_PATH, params=params) as response:
            self._check_status(response)
            token = parse_access_token(response)
            if self.logger.isEnabledFor(logging.DEBUG):
                with log_context(grant_type=grant_type.value):
                    self.logger.debug(
                        "Comarch sign-in exchange\n"
                        f"{dump_request(response.request)}\n\n"
                        f"{dump_response(response)}"
                    )
        return token

    def sign_in_by_card(self, card_no: str, password: str) -> SessionToken:
        """Sign in with a card number and the card holder's password."""
        return self._sign_in(GrantType.BY_CARD, cardNo=card_no, password=password)

    def sign_in_by_phone(self, phone_no: str, password: str) -> SessionToken:
        """Sign in with a phone number and the card holder's password."""
        return self._sign_in(GrantType.BY_PHONE, phoneNo=phone_no, password=password)

    def sign_in_by_phone_only(self, phone_no: str) -> SessionToken:
        """Sign in with a phone number only (SMS grant)."""
        return self._sign_in(GrantType.BY_SMS, phoneNo=phone_no)

    def sign_in_by_card_no_only(self, card_no: str) -> SessionToken:
        """Sign in with a card number only.

        Uses the same SMS grant as :meth:`sign_in_by_phone_only`.
        """
        return self._sign_in(GrantType.BY_SMS, cardNo=card_no)

    def activate_card_no(self, card_no: str) -> SessionToken:
        """Activate a card; the returned token allows creating its card holder."""
        return self._sign_in(GrantType.CARD_ACTIVATION, cardNo=card_no)

    # -------------------- password reset --------------------
    def _reset_password(self, payload: dict[str, str]) -> None:
        with self._send("POST", PASSWORD_RESET_PATH, json=payload) as response:
            self._check_status(response)

    def reset_password_by_card_no(self, card_no: str) -> None:
        """Reset the password of a card to the provider's default."""
        self._reset_password({"cardNo": card_no})

    def reset_password_by_phone_no(self, phone_no: str) -> None:
        """Reset the password of the card bound to a phone number."""
        self._reset_password({"phoneNo": phone_no})

    # -------------------- session-scoped resources --------------------
    def get_balance_info(self, token: SessionToken) -> BalanceInfoResponse:
        """Return the point balance of the signed-in card holder.

        Raises:
            BadResponseError: On any status other than 200.
            DecodeError: If the body is not a balance record.
        """
        with self._send("GET", BALANCE_INFO_PATH, token=token) as response:
            self._check_status(response)
            return self._decode(response, BalanceInfoResponse, "balance info")

    def change_password(self, token: SessionToken, old_password: str, new_password: str) -> None:
        """Replace the card holder's password.

        The provider does not require the current password, so an empty
        ``old_password`` is sent as-is.
        """
        payload = {"oldPass": old_password, "newPass": new_password}
        with self._send("PUT", CARD_PASSWORD_PATH, token=token, json=payload) as response:
            self._check_status(response)

    def create_card_holder(self, token: SessionToken, personal_data: PersonalData) -> None:
        """Create the card-holder account for a token, e.g. one from :meth:`activate_card_no`."""
        with self._send(
            "PUT", CARD_HOLDERS_PATH, token=token, json=personal_data.to_payload()
        ) as response:
            self._check_status(response)

    def sign_out(self, token: SessionToken) -> None:
        """Invalidate ``token`` on the provider side."""
        with self._send("POST", LOGOUT_PATH, token=token) as response:
            self._check_status(response)


__all__ = [
    "BALANCE_INFO_PATH",
    "CARD_HOLDERS_PATH",
    "CARD_PASSWORD_PATH",
    "LOGIN_PATH",
    "LOGOUT_PATH",
    "PASSWORD_RESET_PATH",
    "ComarchClient",
]
