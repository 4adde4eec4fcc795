"""Custom mirror estimate command for the glass-quote CLI."""

import click

from ...mirror import estimate_custom_mirror
from ..formatters import create_console, format_json, format_mirror_table
from ..utils import handle_error, load_config


@click.command()
@click.option("--width", required=True, help="Width in cm.")
@click.option("--height", required=True, help="Height in cm.")
@click.option("--frame", default="frameless", show_default=True, help="Frame type, e.g. thin_metal or solid_wood.")
@click.pass_context
def mirror(ctx: click.Context, width: str, height: str, frame: str) -> None:
    """Estimate the price of a custom mirror."""
    try:
        config = load_config(ctx)
        estimate = estimate_custom_mirror(width, height, frame, config.mirror)
    except Exception as e:
        handle_error(e)
        return

    if ctx.obj["format"] == "json":
        format_json({**estimate.to_dict(), "currency": config.currency})
    else:
        format_mirror_table(estimate, config.currency, create_console(no_color=ctx.obj["no_color"]))
