"""Entry point for running the comarch-client CLI.

This module defines a top-level Click group that aggregates all subcommands
defined in the ``comarch_client.interfaces.cli`` package. Executing
``python -m comarch_client.interfaces.cli`` invokes this group.
"""

import logging

import click

from comarch_client.infrastructure.observability import configure_logging

from .account import balance, cardholder, logout, password
from .context import DEFAULT_CONFIG_PATH, DEFAULT_TOKEN_PATH, build_cli_context
from .login import login


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    envvar="COMARCH_CONFIG",
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="JSON file with base_path, username, password and timeout_seconds.",
)
@click.option(
    "--token-file",
    "token_path",
    envvar="COMARCH_TOKEN_FILE",
    default=str(DEFAULT_TOKEN_PATH),
    show_default=True,
    help="Where the session token is stored between commands.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log requests at debug level.")
@click.pass_context
def cli(ctx: click.Context, config_path: str, token_path: str, verbose: bool) -> None:
    """Command-line client for the Comarch loyalty program."""
    if verbose:
        configure_logging(level=logging.DEBUG)
    ctx.ensure_object(dict)
    ctx.obj["cli_context"] = build_cli_context(
        config_path, token_path, session=ctx.obj.get("session")
    )


cli.add_command(login)
cli.add_command(balance)
cli.add_command(password)
cli.add_command(cardholder)
cli.add_command(logout)


if __name__ == "__main__":
    cli()
