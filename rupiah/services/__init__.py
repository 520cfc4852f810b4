"""Service layer package.

Binds the pure codec in ``rupiah.currency`` to runtime settings for the HTTP
routers and the CLI.
"""

__all__ = [
    "currency_service",
]
