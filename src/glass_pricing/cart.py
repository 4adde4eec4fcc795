"""Shopping cart of priced lines."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .constraints import NumericConstraint, to_decimal, validate_quantity
from .errors import InvalidDimensionError, InvalidPriceInputError
from .logging import LogEvent, log_debug
from .models import OrderQuote, PriceBreakdown, ProductPricingDescriptor
from .quote import DEFAULT_TAX_RATE, assemble_quote

_LINE_PRICE = NumericConstraint(min_value=0, description="Line price", error_type=InvalidPriceInputError)


@dataclass(frozen=True)
class CartLine:
    """One line of a cart.

    ``options`` holds free-form specs such as a custom mirror's shape or frame.
    """

    product_id: str
    quantity: int
    final_price: Decimal
    width_cm: Optional[Decimal] = None
    height_cm: Optional[Decimal] = None
    breakdown: Optional[PriceBreakdown] = None
    options: Dict[str, Any] = field(default_factory=dict)


class Cart:
    """Ordered collection of cart lines."""

    def __init__(self) -> None:
        self._lines: List[CartLine] = []

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines)

    @property
    def count(self) -> int:
        return len(self._lines)

    @property
    def subtotal(self) -> Decimal:
        return sum((line.final_price for line in self._lines), Decimal(0))

    def add_priced(
        self,
        descriptor: ProductPricingDescriptor,
        breakdown: PriceBreakdown,
        options: Optional[Dict[str, Any]] = None,
    ) -> CartLine:
        """Add a line priced by the pricing engine."""
        line = CartLine(
            product_id=descriptor.product_id or "",
            quantity=breakdown.quantity,
            final_price=breakdown.final_price,
            width_cm=breakdown.width_cm,
            height_cm=breakdown.height_cm,
            breakdown=breakdown,
            options=dict(options or {}),
        )
        self._lines.append(line)
        return line

    def add_item(
        self,
        product_id: str,
        quantity: int,
        unit_price: Any,
        price: Optional[Any] = None,
        width_cm: Optional[Any] = None,
        height_cm: Optional[Any] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> CartLine:
        """Add a line with an explicit price.

        Without ``price`` (or with a zero price) the line costs ``unit_price * quantity``.
        """
        validate_quantity(quantity)
        unit = _LINE_PRICE.validate("unit_price", unit_price)
        line_price = _LINE_PRICE.validate("price", price) if price is not None else Decimal(0)
        if not line_price:
            line_price = unit * quantity

        line = CartLine(
            product_id=product_id,
            quantity=quantity,
            final_price=line_price,
            width_cm=to_decimal("width_cm", width_cm, InvalidDimensionError) if width_cm is not None else None,
            height_cm=to_decimal("height_cm", height_cm, InvalidDimensionError) if height_cm is not None else None,
            options=dict(options or {}),
        )
        self._lines.append(line)
        log_debug(LogEvent.QUOTE, "Added cart line", product_id=product_id, price=str(line_price))
        return line

    def remove(self, index: int) -> CartLine:
        """Remove and return the line at ``index``.

        Raises:
            IndexError: If there is no such line, including any negative index
        """
        if index < 0:
            raise IndexError(f"Cart line index out of range: {index}")
        return self._lines.pop(index)

    def clear(self) -> None:
        self._lines.clear()

    def quote(self, tax_rate: Any = DEFAULT_TAX_RATE, shipping_cost: Any = 0) -> OrderQuote:
        """Assemble an order quote from the current lines."""
        return assemble_quote(self._lines, tax_rate, shipping_cost)
