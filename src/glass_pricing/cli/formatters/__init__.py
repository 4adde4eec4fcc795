"""CLI formatters package."""

from .json import format_json, format_zones_json
from .table import (
    create_console,
    format_breakdown_table,
    format_config_table,
    format_mirror_table,
    format_quote_table,
    format_shipping_table,
    format_zones_table,
)

__all__ = [
    "format_json",
    "format_zones_json",
    "create_console",
    "format_breakdown_table",
    "format_config_table",
    "format_mirror_table",
    "format_quote_table",
    "format_shipping_table",
    "format_zones_table",
]
