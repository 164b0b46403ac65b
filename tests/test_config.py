import json
import logging
from pathlib import Path

import pytest

from comarch_client.app.config import ClientSettings, build_client, load_config
from comarch_client.infrastructure.http import ComarchClient, ConfigurationError


def _write(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "comarch.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_config_reads_json(tmp_path: Path) -> None:
    path = _write(tmp_path, {"base_path": "http://comarch.test"})
    assert load_config(path) == {"base_path": "http://comarch.test"}


def test_settings_from_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "base_path": "http://comarch.test",
            "username": "integration",
            "password": "s3cret",
            "timeout_seconds": 3,
        },
    )

    settings = ClientSettings.from_file(path)

    assert settings.base_path == "http://comarch.test"
    assert settings.timeout_seconds == 3.0
    assert "s3cret" not in repr(settings)


def test_settings_default_timeout() -> None:
    settings = ClientSettings.from_mapping(
        {"base_path": "http://comarch.test", "username": "u", "password": "p"}
    )
    assert settings.timeout_seconds == 10.0


def test_settings_allow_no_timeout() -> None:
    settings = ClientSettings.from_mapping(
        {"base_path": "http://comarch.test", "username": "u", "password": "p", "timeout_seconds": None}
    )
    assert settings.timeout_seconds is None


def test_missing_keys_raise_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        ClientSettings.from_mapping({"base_path": "http://comarch.test", "password": ""})

    assert "username" in str(excinfo.value)
    assert "password" in str(excinfo.value)


def test_build_client_applies_settings(http_session) -> None:
    settings = ClientSettings("http://comarch.test", "u", "p", timeout_seconds=4.0)
    logger = logging.getLogger("test.comarch")

    client = build_client(settings, session=http_session, logger=logger)

    assert isinstance(client, ComarchClient)
    assert client.timeout == 4.0
    assert client.session is http_session
    assert client.logger is logger


def test_build_client_rejects_trailing_slash() -> None:
    with pytest.raises(ConfigurationError):
        build_client(ClientSettings("http://comarch.test/", "u", "p"))
