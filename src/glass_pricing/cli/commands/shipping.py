"""Shipping commands for the glass-quote CLI."""

import click

from ..formatters import create_console, format_json, format_shipping_table, format_zones_json, format_zones_table
from ..utils import handle_error, load_config


@click.command()
@click.argument("city")
@click.pass_context
def shipping(ctx: click.Context, city: str) -> None:
    """Show the shipping cost and lead time for CITY."""
    try:
        config = load_config(ctx)
        result = config.resolve_shipping(city)
    except Exception as e:
        handle_error(e)
        return

    if ctx.obj["format"] == "json":
        format_json({**result.to_dict(), "currency": config.currency})
    else:
        format_shipping_table(result, config.currency, create_console(no_color=ctx.obj["no_color"]))


@click.command()
@click.pass_context
def zones(ctx: click.Context) -> None:
    """List the configured shipping zones."""
    try:
        config = load_config(ctx)
    except Exception as e:
        handle_error(e)
        return

    if ctx.obj["format"] == "json":
        format_json(format_zones_json(config.zones.zones, config.zones.default_cost))
    else:
        format_zones_table(
            config.zones.zones,
            config.zones.default_cost,
            config.currency,
            create_console(no_color=ctx.obj["no_color"]),
        )
