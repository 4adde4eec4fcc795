"""Order-level quote assembly.

Discounts are resolved per line by the pricing engine; this module only
sums lines and adds tax and shipping.
"""

from decimal import Decimal
from typing import Any, Iterable, Protocol

from .constraints import NumericConstraint
from .errors import InvalidPriceInputError
from .logging import LogEvent, log_debug
from .models import OrderQuote

DEFAULT_TAX_RATE = Decimal("0.20")

_NON_NEGATIVE = NumericConstraint(min_value=0, error_type=InvalidPriceInputError)


class PricedLine(Protocol):
    """Anything carrying a final line price."""

    @property
    def final_price(self) -> Decimal: ...


def assemble_quote(
    lines: Iterable[PricedLine],
    tax_rate: Any = DEFAULT_TAX_RATE,
    shipping_cost: Any = 0,
    currency: str = "MAD",
) -> OrderQuote:
    """Combine priced lines, tax and shipping into an order quote.

    Args:
        lines: Priced lines (PriceBreakdown or CartLine)
        tax_rate: Tax rate as a fraction, e.g. 0.20
        shipping_cost: Shipping cost for the order
        currency: Currency code carried on the quote

    Returns:
        The assembled OrderQuote

    Raises:
        InvalidPriceInputError: If the tax rate or shipping cost is negative
    """
    rate = _NON_NEGATIVE.validate("tax_rate", tax_rate)
    shipping = _NON_NEGATIVE.validate("shipping_cost", shipping_cost)

    subtotal = Decimal(0)
    count = 0
    for line in lines:
        subtotal += line.final_price
        count += 1

    tax_amount = subtotal * rate
    grand_total = subtotal + tax_amount + shipping

    log_debug(
        LogEvent.QUOTE,
        "Assembled order quote",
        lines=count,
        subtotal=str(subtotal),
        grand_total=str(grand_total),
    )

    return OrderQuote(
        subtotal=subtotal,
        tax_rate=rate,
        tax_amount=tax_amount,
        shipping_cost=shipping,
        grand_total=grand_total,
        line_count=count,
        currency=currency,
    )
