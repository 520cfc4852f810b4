"""Rupiah formatting, parsing and terbilang toolkit with an HTTP front end."""

__version__ = "1.0.0"
