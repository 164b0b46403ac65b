"""Redacted request/response dumps for debug logging.

Card numbers, phone numbers and passwords travel in the login query string,
and tokens in headers and cookies, so dumps mask every query value and every
credential-bearing header. Bodies are never included.
"""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from requests import PreparedRequest, Response

REDACTED = "***"

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie"})


def redact_url(url: str) -> str:
    """Return ``url`` with every query value replaced by :data:`REDACTED`."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = urlencode(
        [(key, REDACTED) for key, _ in parse_qsl(parts.query, keep_blank_values=True)],
        safe="*",
    )
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def _format_headers(headers: Mapping[str, str]) -> str:
    return "\n".join(f"{name}: {value}" for name, value in redact_headers(headers).items())


def dump_request(request: PreparedRequest) -> str:
    lines = [f"{request.method} {redact_url(request.url or '')}"]
    if request.headers:
        lines.append(_format_headers(request.headers))
    return "\n".join(lines)


def dump_response(response: Response) -> str:
    lines = [f"HTTP {response.status_code} {response.reason or ''}".rstrip()]
    if response.headers:
        lines.append(_format_headers(response.headers))
    return "\n".join(lines)


__all__ = ["REDACTED", "dump_request", "dump_response", "redact_headers", "redact_url"]
