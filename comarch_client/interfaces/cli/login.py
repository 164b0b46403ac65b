"""Sign-in commands.

Each subcommand performs one of the provider's login grants and stores the
resulting session token in the token file for later commands.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from comarch_client.domain.models import SessionToken
from comarch_client.infrastructure.http import ComarchClient

from .context import CLIContext, console, report_errors


def _sign_in(ctx: click.Context, call: Callable[[ComarchClient], SessionToken]) -> None:
    cli_context: CLIContext = ctx.obj["cli_context"]
    with report_errors(ctx, "Sign-in"):
        with cli_context.client() as client:
            token = call(client)
        cli_context.save_token(token)
    console.print(
        f"[green]Signed in.[/green] Session valid until "
        f"[bold]{token.expires_at:%Y-%m-%d %H:%M} UTC[/bold]"
    )


@click.group()
def login() -> None:
    """Sign in and store the session token."""


@login.command("card")
@click.argument("card_no")
@click.password_option("--password", confirmation_prompt=False, help="Card password.")
@click.pass_context
def card_cmd(ctx: click.Context, card_no: str, password: str) -> None:
    """Sign in with CARD_NO and its password."""

    _sign_in(ctx, lambda client: client.sign_in_by_card(card_no, password))


@login.command("phone")
@click.argument("phone_no")
@click.password_option("--password", confirmation_prompt=False, help="Card password.")
@click.pass_context
def phone_cmd(ctx: click.Context, phone_no: str, password: str) -> None:
    """Sign in with PHONE_NO and the card password."""

    _sign_in(ctx, lambda client: client.sign_in_by_phone(phone_no, password))


@login.command("sms")
@click.option("--card-no", default=None, help="Card number to sign in with.")
@click.option("--phone-no", default=None, help="Phone number to sign in with.")
@click.pass_context
def sms_cmd(ctx: click.Context, card_no: str | None, phone_no: str | None) -> None:
    """Sign in without a password by card number or phone number."""

    if bool(card_no) == bool(phone_no):
        raise click.UsageError("Pass exactly one of --card-no or --phone-no.")
    if card_no:
        _sign_in(ctx, lambda client: client.sign_in_by_card_no_only(card_no))
    else:
        _sign_in(ctx, lambda client: client.sign_in_by_phone_only(phone_no))


@login.command("activate")
@click.argument("card_no")
@click.pass_context
def activate_cmd(ctx: click.Context, card_no: str) -> None:
    """Activate CARD_NO; the stored session can then create its card holder."""

    _sign_in(ctx, lambda client: client.activate_card_no(card_no))
