"""Main CLI application for the glass pricing engine."""

from typing import Optional

import click
import rich_click as rich_click

from ..logging import configure_logging
from .utils import resolve_format

# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.USE_MARKDOWN = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True


@click.group(invoke_without_command=True)
@click.option(
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    help="Output format. Defaults to 'table' for TTY, 'json' for non-TTY.",
)
@click.option(
    "--pricing-config",
    type=click.Path(dir_okay=False),
    help="Pricing rules YAML file. Takes precedence over GLASS_PRICING_CONFIG_PATH.",
)
@click.option(
    "--zones-config",
    type=click.Path(dir_okay=False),
    help="Shipping zones YAML file. Takes precedence over GLASS_SHIPPING_ZONES_PATH.",
)
@click.option("--verbose", "-v", count=True, help="Increase verbosity (can be used multiple times).")
@click.option("--quiet", "-q", count=True, help="Decrease verbosity (can be used multiple times).")
@click.option("--debug", is_flag=True, help="Enable debug-level logging.")
@click.option("--no-color", is_flag=True, help="Disable color output.")
@click.option("--version", is_flag=True, help="Print version information.")
@click.pass_context
def app(
    ctx: click.Context,
    format: Optional[str] = None,
    pricing_config: Optional[str] = None,
    zones_config: Optional[str] = None,
    verbose: int = 0,
    quiet: int = 0,
    debug: bool = False,
    no_color: bool = False,
    version: bool = False,
) -> None:
    """Glass pricing CLI - price custom cuts, shipping and order quotes.

    Examples:
      # Price a 100 x 120 cm custom cut at 800 per m²
      glass-quote price --unit-price 800 --width 100 --height 120

      # Shipping cost to a city
      glass-quote shipping Rabat

      # Quote two lines shipped to Casablanca for a wholesale account
      glass-quote quote --line 800:100x120:10 --line 250::2 --city Casablanca --role wholesale
    """
    if version:
        try:
            from .. import __version__
        except ImportError:
            __version__ = "unknown"
        click.echo(f"glass-quote version: {__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()

    ctx.ensure_object(dict)

    # Configure logging level based on verbosity
    log_level = "WARNING"
    if debug:
        log_level = "DEBUG"
    elif verbose > quiet:
        log_level = "DEBUG" if verbose >= 2 else "INFO"
    elif quiet > verbose:
        log_level = "ERROR"
    configure_logging(log_level)

    ctx.obj.update(
        {
            "format": resolve_format(format),
            "format_explicit": format is not None,
            "pricing_config": pricing_config,
            "zones_config": zones_config,
            "no_color": no_color,
            "log_level": log_level,
        }
    )


# Import and register subcommands after the group is defined
from .commands import config, mirror, price, quote, shipping  # noqa: E402

app.add_command(price.price)
app.add_command(shipping.shipping)
app.add_command(shipping.zones)
app.add_command(quote.quote)
app.add_command(mirror.mirror)
app.add_command(config.config)
