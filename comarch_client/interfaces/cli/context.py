"""Shared helpers for composing CLI command contexts.

This module centralises common CLI wiring such as resolving the configuration
file, building the HTTP client and persisting the signed-in session token
between invocations.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import click
import requests
from pydantic import ValidationError
from rich.console import Console

from comarch_client.app.config import ClientSettings, build_client
from comarch_client.domain.models import SessionToken
from comarch_client.infrastructure.http import ComarchClient, ComarchError
from comarch_client.infrastructure.observability import get_logger

DEFAULT_CONFIG_PATH = Path("comarch.json")
DEFAULT_TOKEN_PATH = Path("comarch-token.json")

console = Console()
logger = get_logger(__name__)


@dataclass(frozen=True)
class CLIContext:
    """Container for CLI dependencies and file locations."""

    config_path: Path
    token_path: Path
    session: requests.Session | None = None

    @contextmanager
    def client(self) -> Iterator[ComarchClient]:
        """Yield a client configured from :attr:`config_path`."""

        settings = ClientSettings.from_file(self.config_path)
        with build_client(settings, session=self.session) as client:
            yield client

    def save_token(self, token: SessionToken) -> None:
        self.token_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.token_path, "w", encoding="utf-8") as f:
            json.dump(token.to_dict(), f, indent=2)
        self.token_path.chmod(0o600)

    def load_token(self) -> SessionToken | None:
        if not self.token_path.exists():
            return None
        try:
            with open(self.token_path, "r", encoding="utf-8") as f:
                return SessionToken.from_dict(json.load(f))
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Ignoring unreadable token file {self.token_path}")
            return None

    def forget_token(self) -> None:
        self.token_path.unlink(missing_ok=True)


def build_cli_context(
    config_path: str | Path | None = None,
    token_path: str | Path | None = None,
    session: requests.Session | None = None,
) -> CLIContext:
    return CLIContext(
        config_path=Path(config_path) if config_path else DEFAULT_CONFIG_PATH,
        token_path=Path(token_path) if token_path else DEFAULT_TOKEN_PATH,
        session=session,
    )


def require_token(ctx: click.Context, cli_context: CLIContext) -> SessionToken:
    """Return the saved token or exit when there is no usable one."""

    token = cli_context.load_token()
    if token is None:
        console.print("[red]No saved session; run 'comarch login' first.[/red]")
        ctx.exit(1)
    if token.is_expired():
        console.print("[yellow]Saved session has expired; sign in again.[/yellow]")
        ctx.exit(1)
    return token


@contextmanager
def report_errors(ctx: click.Context, action: str) -> Iterator[None]:
    """Turn library and transport failures into a red message and exit code 1."""

    try:
        yield
    except ComarchError as exc:
        logger.debug(f"{action} failed: {exc}")
        console.print(f"[red]{action} failed: {exc}[/red]")
        ctx.exit(1)
    except ValidationError as exc:
        console.print(f"[red]{action} failed: invalid input ({exc.error_count()} errors)[/red]")
        ctx.exit(1)
    except requests.RequestException as exc:
        # requests messages embed the URL, login query string included
        logger.debug(f"{action} failed: {type(exc).__name__}")
        console.print(f"[red]{action} failed: provider unreachable ({type(exc).__name__})[/red]")
        ctx.exit(1)
    except OSError as exc:
        console.print(f"[red]{action} failed: {exc.strerror}: {exc.filename}[/red]")
        ctx.exit(1)
    except ValueError as exc:
        console.print(f"[red]{action} failed: {exc}[/red]")
        ctx.exit(1)


__all__ = [
    "CLIContext",
    "build_cli_context",
    "console",
    "report_errors",
    "require_token",
]
