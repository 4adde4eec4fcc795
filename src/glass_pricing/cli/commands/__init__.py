"""CLI commands package."""

from . import config, mirror, price, quote, shipping

__all__ = ["price", "shipping", "quote", "mirror", "config"]
