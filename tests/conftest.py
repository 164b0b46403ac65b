"""Shared fixtures: a fake provider mounted as a requests transport adapter."""

from __future__ import annotations

import io
import json
from dataclasses import dataclass, field
from typing import Any

import pytest
import requests
from requests import PreparedRequest, Response
from requests.adapters import BaseAdapter

from comarch_client.infrastructure.http import ComarchClient

BASE_PATH = "http://comarch.test"
SERVICE_USER = "username"
SERVICE_PASSWORD = "password"


@dataclass
class CannedResponse:
    status_code: int = 200
    body: bytes = b""
    cookies: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


class FakeProvider(BaseAdapter):
    """Transport adapter that records prepared requests and replays canned responses."""

    def __init__(self) -> None:
        super().__init__()
        self.requests: list[PreparedRequest] = []
        self.timeouts: list[Any] = []
        self.responses: list[CannedResponse] = []
        self.closed_responses: list[Response] = []
        self.error: Exception | None = None

    def reply(
        self,
        status_code: int = 200,
        json_body: Any = None,
        *,
        body: bytes | None = None,
        cookies: dict[str, str] | None = None,
    ) -> None:
        if body is None:
            body = b"" if json_body is None else json.dumps(json_body).encode("utf-8")
        cookies = cookies or {}
        headers = {"Content-Type": "application/json"}
        if cookies:
            headers["Set-Cookie"] = ", ".join(f"{k}={v}; Path=/" for k, v in cookies.items())
        self.responses.append(CannedResponse(status_code, body, cookies, headers))

    @property
    def last_request(self) -> PreparedRequest:
        return self.requests[-1]

    def send(self, request: PreparedRequest, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        canned = self.responses.pop(0) if self.responses else CannedResponse()

        provider = self

        class TrackedResponse(Response):
            def close(self) -> None:
                provider.closed_responses.append(self)
                super().close()

        response = TrackedResponse()
        response.status_code = canned.status_code
        response.reason = "OK" if canned.status_code == 200 else "Error"
        response._content = canned.body
        response._content_consumed = True
        response.raw = io.BytesIO(canned.body)
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        response.headers.update(canned.headers)
        for name, value in canned.cookies.items():
            response.cookies.set(name, value)
        return response

    def close(self) -> None:
        pass


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def http_session(provider: FakeProvider) -> requests.Session:
    session = requests.Session()
    session.trust_env = False
    session.mount("http://", provider)
    return session


@pytest.fixture
def client(http_session: requests.Session) -> ComarchClient:
    return ComarchClient(BASE_PATH, SERVICE_USER, SERVICE_PASSWORD, session=http_session)
