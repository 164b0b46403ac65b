"""Infrastructure layer for comarch-client.

Holds the HTTP adapter for the provider and the logging helpers.
"""

from . import http, observability

__all__ = ["http", "observability"]
