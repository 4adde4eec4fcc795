"""Configuration commands for the glass-quote CLI."""

import click

from ...config_paths import (
    ENV_PRICING_CONFIG,
    ENV_SHIPPING_ZONES,
    PRICING_CONFIG_FILENAME,
    SHIPPING_ZONES_FILENAME,
    get_user_config_dir,
    locate_config,
    seed_user_config,
)
from ..formatters import create_console, format_config_table, format_json
from ..utils import get_env_vars, handle_error, load_config


@click.group()
def config() -> None:
    """Inspect and initialize pricing configuration."""
    pass


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show the effective pricing configuration."""
    try:
        info = load_config(ctx).get_info()
    except Exception as e:
        handle_error(e)
        return

    if ctx.obj["format"] == "json":
        format_json(info)
    else:
        format_config_table(info, create_console(no_color=ctx.obj["no_color"]))


@config.command()
@click.pass_context
def paths(ctx: click.Context) -> None:
    """Show which configuration files are used and where they were found."""
    pricing = locate_config(ENV_PRICING_CONFIG, PRICING_CONFIG_FILENAME, ctx.obj.get("pricing_config"))
    zones = locate_config(ENV_SHIPPING_ZONES, SHIPPING_ZONES_FILENAME, ctx.obj.get("zones_config"))
    data = {
        "pricing": {"path": pricing.path, "source": pricing.source.value},
        "zones": {"path": zones.path, "source": zones.source.value},
        "user_config_dir": str(get_user_config_dir()),
        "environment": get_env_vars(),
    }
    if ctx.obj["format"] == "json":
        format_json(data)
    else:
        format_config_table(data, create_console(no_color=ctx.obj["no_color"]))


@config.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Copy the default files into the user config directory for editing.

    Files already present there are left untouched.
    """
    try:
        copied = seed_user_config()
    except OSError as e:
        handle_error(e)
        return

    data = {"user_config_dir": str(get_user_config_dir()), "copied": copied}
    if ctx.obj["format"] == "json":
        format_json(data)
    elif copied:
        click.echo(f"Copied {', '.join(copied)} to {data['user_config_dir']}")
    else:
        click.echo(f"Nothing to copy; {data['user_config_dir']} already has both files")
