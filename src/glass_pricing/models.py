"""Pricing data structures for the glass pricing engine.

Inputs (product descriptors, dimension requests, commercial context) and
outputs (price breakdowns, shipping and order quotes) are immutable values.
Money is carried as unrounded ``Decimal``; rounding happens only in the
presentation helpers.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Dict, Optional

from .constraints import NumericConstraint, to_decimal, validate_quantity
from .errors import InvalidDimensionError, InvalidPriceInputError, InvalidRoleError

CENT = Decimal("0.01")

_NON_NEGATIVE_PRICE = NumericConstraint(
    min_value=0,
    description="Price per square meter, or per item for fixed products",
    error_type=InvalidPriceInputError,
)


def round_money(value: Decimal) -> Decimal:
    """Round a money amount to 2 places, half up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class CommercialRole(str, Enum):
    """Commercial role of the buyer."""

    CUSTOMER = "customer"
    WHOLESALE = "wholesale"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: Any) -> "CommercialRole":
        """Parse a role from its name, case-insensitively.

        Raises:
            InvalidRoleError: If the role is unknown
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        allowed = ", ".join(r.value for r in cls)
        raise InvalidRoleError(f"Unknown role {value!r}. Allowed roles: {allowed}", "role", value)


@dataclass(frozen=True)
class ProductPricingDescriptor:
    """Pricing-relevant view of a catalog product.

    - unit_area_price: price per m² when customizable, flat per-item price otherwise
    - is_customizable: whether area-based pricing applies
    """

    unit_area_price: Decimal
    is_customizable: bool
    product_id: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "unit_area_price",
            _NON_NEGATIVE_PRICE.validate("unit_area_price", self.unit_area_price),
        )
        object.__setattr__(self, "is_customizable", bool(self.is_customizable))


@dataclass(frozen=True)
class DimensionRequest:
    """Requested quantity and, for custom cuts, dimensions in centimeters.

    Bounds are checked by the pricing engine, since they only apply to
    customizable products and depend on the dimension policy.
    """

    quantity: int = 1
    width_cm: Optional[Decimal] = None
    height_cm: Optional[Decimal] = None

    def __post_init__(self) -> None:
        validate_quantity(self.quantity)
        for name in ("width_cm", "height_cm"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, to_decimal(name, value, InvalidDimensionError))


@dataclass(frozen=True)
class CommercialContext:
    """Commercial context of the actor requesting a price."""

    role: CommercialRole = CommercialRole.CUSTOMER

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", CommercialRole.parse(self.role))


@dataclass(frozen=True)
class PriceBreakdown:
    """Result of a single pricing computation.

    ``raw_total`` is the pre-discount reference price kept for display next
    to ``final_price``. Values are unrounded.
    """

    area_m2: Decimal
    base_unit_price: Decimal
    raw_total: Decimal
    wholesale_discount_applied: bool
    volume_discount_applied: bool
    final_price: Decimal
    quantity: int = 1
    width_cm: Optional[Decimal] = None
    height_cm: Optional[Decimal] = None

    @property
    def total_area_m2(self) -> Decimal:
        """Area of the whole line (area per piece times quantity)."""
        return self.area_m2 * self.quantity

    @property
    def savings(self) -> Decimal:
        """Difference between the reference price and the final price."""
        return self.raw_total - self.final_price

    def rounded_final_price(self) -> Decimal:
        """Final price rounded for presentation."""
        return round_money(self.final_price)

    def to_dict(self) -> Dict[str, Any]:
        """Presentation form with money rounded to 2 places."""
        return {
            "area_m2": str(self.area_m2),
            "total_area_m2": str(self.total_area_m2),
            "width_cm": str(self.width_cm) if self.width_cm is not None else None,
            "height_cm": str(self.height_cm) if self.height_cm is not None else None,
            "quantity": self.quantity,
            "base_unit_price": str(round_money(self.base_unit_price)),
            "raw_total": str(round_money(self.raw_total)),
            "wholesale_discount_applied": self.wholesale_discount_applied,
            "volume_discount_applied": self.volume_discount_applied,
            "final_price": str(self.rounded_final_price()),
        }


@dataclass(frozen=True)
class ShippingZone:
    """Delivery region with a fixed cost and lead time."""

    city: str
    cost: Decimal
    delivery_days: int

    def __post_init__(self) -> None:
        if not isinstance(self.city, str) or not self.city.strip():
            raise InvalidPriceInputError("Shipping zone city must be a non-empty string", "city", self.city)
        object.__setattr__(self, "cost", _NON_NEGATIVE_PRICE.validate("cost", self.cost))
        if isinstance(self.delivery_days, bool) or not isinstance(self.delivery_days, int) or self.delivery_days < 0:
            raise InvalidPriceInputError(
                f"delivery_days must be a non-negative integer, got {self.delivery_days!r}",
                "delivery_days",
                self.delivery_days,
            )


@dataclass(frozen=True)
class ShippingQuote:
    """Resolved shipping cost for a destination.

    ``delivery_days`` is None when the city fell back to the default cost.
    """

    city: str
    cost: Decimal
    delivery_days: Optional[int] = None
    matched: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "city": self.city,
            "cost": str(round_money(self.cost)),
            "delivery_days": self.delivery_days,
            "matched": self.matched,
        }


@dataclass(frozen=True)
class OrderQuote:
    """Order-level totals derived from priced lines."""

    subtotal: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    shipping_cost: Decimal
    grand_total: Decimal
    line_count: int = 0
    currency: str = field(default="MAD")

    def to_dict(self) -> Dict[str, Any]:
        """Presentation form with money rounded to 2 places."""
        return {
            "subtotal": str(round_money(self.subtotal)),
            "tax_rate": str(self.tax_rate),
            "tax_amount": str(round_money(self.tax_amount)),
            "shipping_cost": str(round_money(self.shipping_cost)),
            "grand_total": str(round_money(self.grand_total)),
            "line_count": self.line_count,
            "currency": self.currency,
        }
