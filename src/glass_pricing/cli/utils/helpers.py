"""Helper functions for CLI operations."""

import os
import sys
from decimal import Decimal
from typing import Dict, Optional, Tuple

import click

from ...errors import ConfigurationError, PricingValidationError
from ...models import DimensionRequest, ProductPricingDescriptor, round_money
from ...settings import PricingConfig


class ExitCode:
    """Standard exit codes for the CLI."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    INVALID_USAGE = 2
    CONFIG_ERROR = 4


def resolve_format(cli_format: Optional[str] = None, default_tty: str = "table", default_non_tty: str = "json") -> str:
    """Resolve output format with TTY detection.

    Args:
        cli_format: Format specified via CLI flag
        default_tty: Default format for TTY output
        default_non_tty: Default format for non-TTY output

    Returns:
        Resolved format name
    """
    if cli_format:
        return cli_format.lower()

    if sys.stdout.isatty():
        return default_tty
    else:
        return default_non_tty


def exit_code_for(error: Exception) -> int:
    """Map an exception to the exit code reported for it."""
    if isinstance(error, (PricingValidationError, click.BadParameter)):
        return ExitCode.INVALID_USAGE
    if isinstance(error, ConfigurationError):
        return ExitCode.CONFIG_ERROR
    return ExitCode.GENERIC_ERROR


def handle_error(error: Exception, exit_code: Optional[int] = None) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        error: Exception to handle
        exit_code: Exit code to use; derived from the error type if None
    """
    message = getattr(error, "message", None) or str(error)
    click.echo(f"Error: {message}", err=True)
    sys.exit(exit_code if exit_code is not None else exit_code_for(error))


def get_env_vars() -> Dict[str, Optional[str]]:
    """Get the configuration environment variables and their values."""
    return {key: os.environ.get(key) for key in ("GLASS_PRICING_CONFIG_PATH", "GLASS_SHIPPING_ZONES_PATH")}


def parse_line_spec(spec: str) -> Tuple[ProductPricingDescriptor, DimensionRequest]:
    """Parse a ``--line`` value.

    Accepted forms are ``UNIT_PRICE:WIDTHxHEIGHT:QTY`` for custom cuts and
    ``UNIT_PRICE::QTY`` for fixed-price items.

    Raises:
        click.BadParameter: If the value does not match either form
    """
    parts = spec.split(":")
    if len(parts) != 3:
        raise click.BadParameter(f"Line '{spec}' must look like PRICE:WIDTHxHEIGHT:QTY or PRICE::QTY")

    unit_price, size, qty = (p.strip() for p in parts)
    try:
        quantity = int(qty)
    except ValueError:
        raise click.BadParameter(f"Quantity '{qty}' in line '{spec}' is not an integer") from None

    if not size:
        return ProductPricingDescriptor(unit_price, is_customizable=False), DimensionRequest(quantity)

    dims = size.lower().split("x")
    if len(dims) != 2:
        raise click.BadParameter(f"Size '{size}' in line '{spec}' must look like WIDTHxHEIGHT")
    return (
        ProductPricingDescriptor(unit_price, is_customizable=True),
        DimensionRequest(quantity, width_cm=dims[0], height_cm=dims[1]),
    )


def format_money(value: Decimal, currency: str) -> str:
    """Format a money amount with two decimals and a currency code."""
    return f"{round_money(value):,} {currency}"


def load_config(ctx: click.Context) -> PricingConfig:
    """Load the pricing configuration selected by the global options."""
    pricing_path = ctx.obj.get("pricing_config")
    zones_path = ctx.obj.get("zones_config")
    if pricing_path is None and zones_path is None:
        return PricingConfig.get_default()
    return PricingConfig(pricing_path=pricing_path, zones_path=zones_path)
