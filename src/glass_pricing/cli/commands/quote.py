"""Order quote command for the glass-quote CLI."""

from typing import Optional, Tuple

import click

from ...models import CommercialContext, CommercialRole
from ...quote import assemble_quote
from ..formatters import create_console, format_json, format_quote_table
from ..utils import handle_error, load_config, parse_line_spec

ROLE_CHOICES = [role.value for role in CommercialRole]


@click.command()
@click.option(
    "--line",
    "lines",
    multiple=True,
    required=True,
    help="Order line as PRICE:WIDTHxHEIGHT:QTY (custom cut) or PRICE::QTY (fixed item). Repeatable.",
)
@click.option("--role", type=click.Choice(ROLE_CHOICES, case_sensitive=False), default="customer", show_default=True)
@click.option("--city", help="Destination city; omit to quote without shipping.")
@click.option("--tax-rate", help="Override the configured tax rate, e.g. 0.2.")
@click.pass_context
def quote(
    ctx: click.Context,
    lines: Tuple[str, ...],
    role: str,
    city: Optional[str],
    tax_rate: Optional[str],
) -> None:
    """Quote an order: price each line, then add tax and shipping."""
    try:
        config = load_config(ctx)
        context = CommercialContext(role)
        breakdowns = []
        for spec in lines:
            descriptor, request = parse_line_spec(spec)
            breakdowns.append(config.engine.compute_price(descriptor, request, context))

        shipping = config.resolve_shipping(city) if city else None
        order = assemble_quote(
            breakdowns,
            tax_rate if tax_rate is not None else config.tax_rate,
            shipping.cost if shipping is not None else 0,
            currency=config.currency,
        )
    except Exception as e:
        handle_error(e)
        return

    if ctx.obj["format"] == "json":
        format_json(
            {
                "lines": [b.to_dict() for b in breakdowns],
                "shipping": shipping.to_dict() if shipping is not None else None,
                "quote": order.to_dict(),
            }
        )
    else:
        format_quote_table(breakdowns, order, shipping, create_console(no_color=ctx.obj["no_color"]))
