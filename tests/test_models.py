"""Tests for pricing data structures."""

from decimal import Decimal

import pytest

from glass_pricing.errors import (
    InvalidDimensionError,
    InvalidPriceInputError,
    InvalidQuantityError,
    InvalidRoleError,
)
from glass_pricing.models import (
    CommercialContext,
    CommercialRole,
    DimensionRequest,
    OrderQuote,
    PriceBreakdown,
    ProductPricingDescriptor,
    ShippingZone,
    round_money,
)


class TestProductPricingDescriptor:
    """Tests for ProductPricingDescriptor."""

    def test_price_is_converted_to_decimal(self) -> None:
        """Floats are converted through their string form."""
        product = ProductPricingDescriptor(unit_area_price=799.9, is_customizable=True)
        assert product.unit_area_price == Decimal("799.9")

    def test_zero_price_is_allowed(self) -> None:
        """Free items are valid."""
        assert ProductPricingDescriptor(0, False).unit_area_price == 0

    @pytest.mark.parametrize("price", [-1, "-0.01", float("nan"), float("inf"), "abc", None, True])
    def test_invalid_price(self, price: object) -> None:
        """Negative or non-numeric prices are rejected."""
        with pytest.raises(InvalidPriceInputError) as exc_info:
            ProductPricingDescriptor(price, True)  # type: ignore[arg-type]
        assert exc_info.value.param_name == "unit_area_price"


class TestDimensionRequest:
    """Tests for DimensionRequest."""

    def test_defaults(self) -> None:
        """A bare request is one piece with no dimensions."""
        request = DimensionRequest()
        assert request.quantity == 1
        assert request.width_cm is None
        assert request.height_cm is None

    def test_dimensions_are_converted(self) -> None:
        """Dimensions accept strings and floats."""
        request = DimensionRequest(2, width_cm="100", height_cm=120.5)
        assert request.width_cm == Decimal("100")
        assert request.height_cm == Decimal("120.5")

    @pytest.mark.parametrize("quantity", [0, -3, 1.5, "2", True, None])
    def test_invalid_quantity(self, quantity: object) -> None:
        """Quantity must be an integer of at least 1."""
        with pytest.raises(InvalidQuantityError):
            DimensionRequest(quantity)  # type: ignore[arg-type]

    def test_non_numeric_dimension(self) -> None:
        """Dimensions must be numbers."""
        with pytest.raises(InvalidDimensionError):
            DimensionRequest(1, width_cm="wide", height_cm=100)


class TestCommercialRole:
    """Tests for role parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("customer", CommercialRole.CUSTOMER),
            ("Wholesale", CommercialRole.WHOLESALE),
            (" ADMIN ", CommercialRole.ADMIN),
            (CommercialRole.WHOLESALE, CommercialRole.WHOLESALE),
        ],
    )
    def test_parse(self, value: object, expected: CommercialRole) -> None:
        """Roles parse case-insensitively."""
        assert CommercialRole.parse(value) is expected

    @pytest.mark.parametrize("value", ["reseller", "", None, 1])
    def test_unknown_role(self, value: object) -> None:
        """Unknown roles raise InvalidRoleError."""
        with pytest.raises(InvalidRoleError) as exc_info:
            CommercialRole.parse(value)
        assert "Allowed roles" in str(exc_info.value)

    def test_context_accepts_role_names(self) -> None:
        """CommercialContext normalizes its role."""
        assert CommercialContext("wholesale").role is CommercialRole.WHOLESALE
        assert CommercialContext().role is CommercialRole.CUSTOMER


class TestPriceBreakdown:
    """Tests for PriceBreakdown presentation helpers."""

    def _breakdown(self) -> PriceBreakdown:
        return PriceBreakdown(
            area_m2=Decimal("0.7373"),
            base_unit_price=Decimal("589.84"),
            raw_total=Decimal("1769.52"),
            wholesale_discount_applied=True,
            volume_discount_applied=False,
            final_price=Decimal("1504.092"),
            quantity=3,
            width_cm=Decimal("73"),
            height_cm=Decimal("101"),
        )

    def test_rounding_only_on_presentation(self) -> None:
        """The stored value keeps all digits; presentation rounds half up."""
        breakdown = self._breakdown()
        assert breakdown.final_price == Decimal("1504.092")
        assert breakdown.rounded_final_price() == Decimal("1504.09")

    def test_derived_values(self) -> None:
        """Total area and savings are derived from the stored values."""
        breakdown = self._breakdown()
        assert breakdown.total_area_m2 == Decimal("2.2119")
        assert breakdown.savings == Decimal("265.428")

    def test_to_dict(self) -> None:
        """to_dict rounds money to 2 places."""
        data = self._breakdown().to_dict()
        assert data["final_price"] == "1504.09"
        assert data["raw_total"] == "1769.52"
        assert data["width_cm"] == "73"
        assert data["quantity"] == 3
        assert data["wholesale_discount_applied"] is True


def test_round_money_half_up() -> None:
    """Half cents round away from zero."""
    assert round_money(Decimal("0.125")) == Decimal("0.13")
    assert round_money(Decimal("2.5")) == Decimal("2.50")


class TestShippingZone:
    """Tests for ShippingZone validation."""

    def test_valid_zone(self) -> None:
        """Costs are converted to Decimal."""
        zone = ShippingZone("Rabat", 50, 1)
        assert zone.cost == Decimal("50")

    @pytest.mark.parametrize(
        "city,cost,days",
        [("", 50, 1), ("Rabat", -1, 1), ("Rabat", 50, -1), ("Rabat", 50, 1.5), (None, 50, 1)],
    )
    def test_invalid_zone(self, city: object, cost: object, days: object) -> None:
        """Empty city, negative cost or bad lead time are rejected."""
        with pytest.raises(InvalidPriceInputError):
            ShippingZone(city, cost, days)  # type: ignore[arg-type]


def test_order_quote_to_dict() -> None:
    """OrderQuote presentation rounds money."""
    quote = OrderQuote(
        subtotal=Decimal("100.005"),
        tax_rate=Decimal("0.2"),
        tax_amount=Decimal("20.001"),
        shipping_cost=Decimal("50"),
        grand_total=Decimal("170.006"),
        line_count=1,
    )
    data = quote.to_dict()
    assert data["subtotal"] == "100.01"
    assert data["grand_total"] == "170.01"
    assert data["shipping_cost"] == "50.00"
    assert data["currency"] == "MAD"
