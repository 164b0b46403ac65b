"""Tests for the SessionToken value object."""

from datetime import datetime, timedelta, timezone

import pytest

from comarch_client.domain.models import GrantType, ServiceCredentials, SessionToken

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestSessionToken:
    def test_expiry_helpers(self):
        token = SessionToken(value="abc", expires_at=NOW + timedelta(minutes=5))

        assert token.expires_in(NOW) == timedelta(minutes=5)
        assert not token.is_expired(NOW)
        assert token.is_expired(NOW + timedelta(minutes=5))

    def test_round_trip_through_dict(self):
        token = SessionToken(
            value="abc",
            expires_at=NOW,
            cookies={"JSESSIONID": "xyz"},
        )

        payload = token.to_dict()

        assert payload == {
            "value": "abc",
            "expires_at": "2024-05-01T12:00:00+00:00",
            "cookies": {"JSESSIONID": "xyz"},
        }
        assert SessionToken.from_dict(payload) == token

    def test_naive_timestamp_is_read_as_utc(self):
        token = SessionToken.from_dict({"value": "abc", "expires_at": "2024-05-01T12:00:00"})

        assert token.expires_at == NOW
        assert dict(token.cookies) == {}

    def test_missing_value_raises(self):
        with pytest.raises(KeyError):
            SessionToken.from_dict({"expires_at": "2024-05-01T12:00:00"})

    def test_repr_hides_secrets(self):
        token = SessionToken(value="secret-token", expires_at=NOW, cookies={"JSESSIONID": "secret-cookie"})

        text = repr(token)

        assert "secret-token" not in text
        assert "secret-cookie" not in text
        assert "JSESSIONID" in text

    def test_token_is_immutable(self):
        token = SessionToken(value="abc", expires_at=NOW)

        with pytest.raises(AttributeError):
            token.value = "other"


def test_grant_type_values():
    assert [g.value for g in GrantType] == [
        "authbycard",
        "authbyphone",
        "authbysms",
        "cardactivation",
    ]


def test_service_credentials_repr_hides_password():
    credentials = ServiceCredentials("integration", "s3cret")

    assert "integration" in repr(credentials)
    assert "s3cret" not in repr(credentials)
