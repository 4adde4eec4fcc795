"""Rich table formatter for CLI output."""

import sys
from typing import Any, Dict, List, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ...mirror import MirrorEstimate
from ...models import OrderQuote, PriceBreakdown, ShippingQuote, ShippingZone
from ..utils import format_money


def create_console(output: Optional[TextIO] = None, no_color: bool = False) -> Console:
    """Create a Rich console instance.

    Args:
        output: Output stream (defaults to stdout)
        no_color: Disable color output

    Returns:
        Console instance
    """
    if output is None:
        output = sys.stdout

    return Console(file=output, no_color=no_color)


def _flag(value: bool) -> Text:
    return Text("✓", style="green") if value else Text("✗", style="dim")


def format_breakdown_table(breakdown: PriceBreakdown, currency: str, console: Optional[Console] = None) -> None:
    """Format a price breakdown as a Rich table.

    Args:
        breakdown: Computed line price
        currency: Currency code for money columns
        console: Rich console (will create if None)
    """
    if console is None:
        console = create_console()

    table = Table(title="Price Breakdown", show_header=True, header_style="bold magenta")
    table.add_column("Item", style="cyan")
    table.add_column("Value", justify="right")

    if breakdown.width_cm is not None and breakdown.height_cm is not None:
        table.add_row("Size", f"{breakdown.width_cm} x {breakdown.height_cm} cm")
        table.add_row("Area per piece", f"{breakdown.area_m2} m²")
        table.add_row("Total area", f"{breakdown.total_area_m2} m²")
    table.add_row("Quantity", str(breakdown.quantity))
    table.add_row("Unit price", format_money(breakdown.base_unit_price, currency))
    table.add_row("Before discounts", format_money(breakdown.raw_total, currency))
    table.add_row("Wholesale discount", _flag(breakdown.wholesale_discount_applied))
    table.add_row("Volume discount", _flag(breakdown.volume_discount_applied))
    table.add_row(Text("Final price", style="bold"), Text(format_money(breakdown.final_price, currency), style="bold green"))

    console.print(table)


def format_shipping_table(quote: ShippingQuote, currency: str, console: Optional[Console] = None) -> None:
    """Format a resolved shipping quote."""
    if console is None:
        console = create_console()

    console.print(f"[bold]City:[/bold] {quote.city}")
    console.print(f"[bold]Cost:[/bold] {format_money(quote.cost, currency)}")
    if quote.matched:
        console.print(f"[bold]Delivery:[/bold] {quote.delivery_days} day(s)")
    else:
        console.print("[dim]No shipping zone for this city; national default applied[/dim]")


def format_zones_table(zones: List[ShippingZone], default_cost: Any, currency: str, console: Optional[Console] = None) -> None:
    """Format the shipping zone table."""
    if console is None:
        console = create_console()

    table = Table(title="Shipping Zones", show_header=True, header_style="bold magenta")
    table.add_column("City", style="cyan")
    table.add_column("Cost", justify="right")
    table.add_column("Delivery (days)", justify="right")

    for zone in sorted(zones, key=lambda z: z.city):
        table.add_row(zone.city, format_money(zone.cost, currency), str(zone.delivery_days))

    console.print(table)
    console.print(f"[dim]Other cities: {format_money(default_cost, currency)}[/dim]")


def format_quote_table(
    lines: List[PriceBreakdown],
    quote: OrderQuote,
    shipping: Optional[ShippingQuote] = None,
    console: Optional[Console] = None,
) -> None:
    """Format an order quote with its lines."""
    if console is None:
        console = create_console()

    currency = quote.currency
    table = Table(title="Order Quote", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Size", style="cyan")
    table.add_column("Qty", justify="right")
    table.add_column("Before discounts", justify="right")
    table.add_column("Price", justify="right")

    for index, line in enumerate(lines, start=1):
        size = f"{line.width_cm} x {line.height_cm} cm" if line.width_cm is not None else "-"
        table.add_row(
            str(index),
            size,
            str(line.quantity),
            format_money(line.raw_total, currency),
            format_money(line.final_price, currency),
        )

    console.print(table)
    console.print(f"[bold]Subtotal:[/bold] {format_money(quote.subtotal, currency)}")
    console.print(f"[bold]Tax ({(quote.tax_rate * 100).normalize():f}%):[/bold] {format_money(quote.tax_amount, currency)}")
    shipping_label = f"Shipping ({shipping.city})" if shipping is not None else "Shipping"
    console.print(f"[bold]{shipping_label}:[/bold] {format_money(quote.shipping_cost, currency)}")
    console.print(f"[bold green]Total:[/bold green] {format_money(quote.grand_total, currency)}")


def format_mirror_table(estimate: MirrorEstimate, currency: str, console: Optional[Console] = None) -> None:
    """Format a custom mirror estimate."""
    if console is None:
        console = create_console()

    console.print(f"[bold]Area:[/bold] {estimate.area_m2} m²")
    console.print(f"[bold]Frame:[/bold] {estimate.frame_type} (x{estimate.frame_factor})")
    console.print(f"[bold green]Price:[/bold green] {estimate.price} {currency}")
    if estimate.minimum_applied:
        console.print("[dim]Minimum price applied[/dim]")


def format_config_table(info: Dict[str, Any], console: Optional[Console] = None) -> None:
    """Format the effective configuration as key/value rows."""
    if console is None:
        console = create_console()

    table = Table(title="Pricing Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="yellow")

    for key, value in info.items():
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                table.add_row(f"{key}.{sub_key}", str(sub_value))
        else:
            table.add_row(key, str(value))

    console.print(table)
