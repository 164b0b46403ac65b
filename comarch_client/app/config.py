"""Configuration utilities for comarch-client.

Provides helpers for loading client settings from JSON files and building a
configured :class:`ComarchClient` from them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from requests import Session

from comarch_client.infrastructure.http import ComarchClient, ConfigurationError

REQUIRED_KEYS = ("base_path", "username", "password")


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A dictionary of configuration values.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings for the provider's API."""

    base_path: str
    username: str
    password: str = field(repr=False)
    timeout_seconds: float | None = 10.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ClientSettings":
        """Build settings from a mapping such as a parsed config file.

        Raises:
            ConfigurationError: If a required key is missing or empty.
        """
        missing = [key for key in REQUIRED_KEYS if not data.get(key)]
        if missing:
            raise ConfigurationError(
                f"Missing configuration keys: {', '.join(missing)}")
        timeout = data.get("timeout_seconds", 10.0)
        return cls(
            base_path=str(data["base_path"]),
            username=str(data["username"]),
            password=str(data["password"]),
            timeout_seconds=float(timeout) if timeout is not None else None,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "ClientSettings":
        return cls.from_mapping(load_config(path))


def build_client(
    settings: ClientSettings,
    *,
    session: Session | None = None,
    logger: logging.Logger | None = None,
) -> ComarchClient:
    """Return a :class:`ComarchClient` configured from ``settings``."""
    return ComarchClient(
        settings.base_path,
        settings.username,
        settings.password,
        session=session,
        logger=logger,
        timeout=settings.timeout_seconds,
    )


__all__ = ["ClientSettings", "build_client", "load_config"]
