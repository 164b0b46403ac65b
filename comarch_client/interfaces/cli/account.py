"""Account commands for the signed-in card holder.

Provides balance lookups, password management, card-holder registration and
sign-out. Every command except ``password reset`` needs a token stored by
``comarch login``.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.table import Table

from comarch_client.domain.models import PersonalData

from .context import CLIContext, console, report_errors, require_token


def _mask(card_no: str) -> str:
    return f"****{card_no[-4:]}" if len(card_no) > 4 else card_no


@click.command()
@click.pass_context
def balance(ctx: click.Context) -> None:
    """Show the point balance of the signed-in card."""

    cli_context: CLIContext = ctx.obj["cli_context"]
    token = require_token(ctx, cli_context)
    with report_errors(ctx, "Balance lookup"):
        with cli_context.client() as client:
            info = client.get_balance_info(token)

    console.print(
        f"Card [bold]{_mask(info.card_no)}[/bold]: "
        f"[green]{info.balance_info.balance}[/green] points "
        f"(rate {info.balance_info.balance_rate}, last visit {info.last_auth or '-'})"
    )
    if not info.express_points:
        return

    table = Table(title="Expiring points")
    table.add_column("Points", justify="right", style="bold")
    table.add_column("Issued")
    table.add_column("Expires")
    for entry in info.express_points:
        table.add_row(str(entry.points), entry.issue_date, entry.expiry_date)
    console.print(table)


@click.group()
def password() -> None:
    """Change or reset the card password."""


@password.command("change")
@click.option(
    "--old",
    "old_password",
    prompt="Current password",
    hide_input=True,
    default="",
    help="Current password; may be left empty.",
)
@click.password_option("--new", "new_password", help="New password.")
@click.pass_context
def change_cmd(ctx: click.Context, old_password: str, new_password: str) -> None:
    """Replace the password of the signed-in card."""

    cli_context: CLIContext = ctx.obj["cli_context"]
    token = require_token(ctx, cli_context)
    with report_errors(ctx, "Password change"):
        with cli_context.client() as client:
            client.change_password(token, old_password, new_password)
    console.print("[green]Password changed.[/green]")


@password.command("reset")
@click.option("--card-no", default=None, help="Card whose password is reset.")
@click.option("--phone-no", default=None, help="Phone number bound to the card.")
@click.pass_context
def reset_cmd(ctx: click.Context, card_no: str | None, phone_no: str | None) -> None:
    """Reset a password to the provider's default; no sign-in needed."""

    if bool(card_no) == bool(phone_no):
        raise click.UsageError("Pass exactly one of --card-no or --phone-no.")
    cli_context: CLIContext = ctx.obj["cli_context"]
    with report_errors(ctx, "Password reset"):
        with cli_context.client() as client:
            if card_no:
                client.reset_password_by_card_no(card_no)
            else:
                client.reset_password_by_phone_no(phone_no)
    console.print("[green]Password reset requested.[/green]")


@click.group()
def cardholder() -> None:
    """Manage the card-holder profile."""


@cardholder.command("create")
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def create_cmd(ctx: click.Context, data_file: Path) -> None:
    """Create the card holder from the JSON profile in DATA_FILE.

    Keys use the provider's names, e.g. ``name``, ``surname``, ``birthday``,
    ``mobilePhone`` and ``acceptAdv``.
    """

    cli_context: CLIContext = ctx.obj["cli_context"]
    token = require_token(ctx, cli_context)
    with report_errors(ctx, "Card-holder creation"):
        with open(data_file, "r", encoding="utf-8") as f:
            personal_data = PersonalData.model_validate(json.load(f))
        with cli_context.client() as client:
            client.create_card_holder(token, personal_data)
    console.print("[green]Card holder created.[/green]")


@click.command()
@click.pass_context
def logout(ctx: click.Context) -> None:
    """Sign out and delete the stored token."""

    cli_context: CLIContext = ctx.obj["cli_context"]
    token = cli_context.load_token()
    if token is None:
        console.print("[yellow]Not signed in.[/yellow]")
        return
    with report_errors(ctx, "Sign-out"):
        with cli_context.client() as client:
            client.sign_out(token)
    cli_context.forget_token()
    console.print("[green]Signed out.[/green]")
