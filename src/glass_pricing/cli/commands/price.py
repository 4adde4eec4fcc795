"""Line pricing command for the glass-quote CLI."""

import dataclasses
from typing import Optional

import click

from ...models import CommercialContext, CommercialRole, DimensionRequest, ProductPricingDescriptor
from ...pricing import DimensionPolicy, PricingEngine
from ..formatters import create_console, format_breakdown_table, format_json
from ..utils import handle_error, load_config

ROLE_CHOICES = [role.value for role in CommercialRole]


@click.command()
@click.option("--unit-price", required=True, help="Price per m² (custom cuts) or per item (fixed products).")
@click.option("--customizable/--fixed", default=True, help="Area-based pricing (default) or flat per-item price.")
@click.option("--width", help="Width in cm (custom cuts).")
@click.option("--height", help="Height in cm (custom cuts).")
@click.option("--quantity", "-n", type=int, default=1, show_default=True, help="Number of pieces.")
@click.option("--role", type=click.Choice(ROLE_CHOICES, case_sensitive=False), default="customer", show_default=True)
@click.option("--clamp", is_flag=True, help="Clamp out-of-range dimensions instead of rejecting them.")
@click.pass_context
def price(
    ctx: click.Context,
    unit_price: str,
    customizable: bool,
    width: Optional[str],
    height: Optional[str],
    quantity: int,
    role: str,
    clamp: bool,
) -> None:
    """Compute the price of one line."""
    try:
        config = load_config(ctx)
        engine = config.engine
        if clamp:
            engine = PricingEngine(dataclasses.replace(config.policy, dimension_policy=DimensionPolicy.CLAMP))

        breakdown = engine.compute_price(
            ProductPricingDescriptor(unit_price, is_customizable=customizable),
            DimensionRequest(quantity, width_cm=width, height_cm=height),
            CommercialContext(role),
        )
    except Exception as e:
        handle_error(e)
        return

    if ctx.obj["format"] == "json":
        format_json({**breakdown.to_dict(), "currency": config.currency})
    else:
        console = create_console(no_color=ctx.obj["no_color"])
        format_breakdown_table(breakdown, config.currency, console)
