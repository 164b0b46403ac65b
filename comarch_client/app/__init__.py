"""Application wiring: settings and client construction."""

from .config import ClientSettings, build_client, load_config

__all__ = ["ClientSettings", "build_client", "load_config"]
