"""Domain layer for comarch-client.

Value objects shared by the HTTP client, the configuration helpers and the
CLI. Nothing in this package performs I/O.
"""

from . import models

__all__ = ["models"]
