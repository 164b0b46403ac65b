"""CLI interface for comarch-client.

This package is the home of all Click commands; ``cli`` is the console entry
point installed as ``comarch``.
"""

from .__main__ import cli
from .account import balance, cardholder, logout, password
from .login import login

__all__ = [
    "balance",
    "cardholder",
    "cli",
    "login",
    "logout",
    "password",
]
