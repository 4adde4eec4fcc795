"""Tests for order quote assembly."""

from decimal import Decimal

import pytest

from glass_pricing.errors import InvalidPriceInputError
from glass_pricing.models import CommercialContext, DimensionRequest, PriceBreakdown, ProductPricingDescriptor
from glass_pricing.pricing import compute_price
from glass_pricing.quote import assemble_quote


def _line(final_price: str) -> PriceBreakdown:
    value = Decimal(final_price)
    return PriceBreakdown(
        area_m2=Decimal(0),
        base_unit_price=value,
        raw_total=value,
        wholesale_discount_applied=False,
        volume_discount_applied=False,
        final_price=value,
    )


def test_checkout_totals() -> None:
    """Subtotal, 20% tax and shipping add up."""
    quote = assemble_quote([_line("960"), _line("250")], Decimal("0.20"), Decimal("50"))

    assert quote.subtotal == Decimal("1210")
    assert quote.tax_amount == Decimal("242")
    assert quote.shipping_cost == Decimal("50")
    assert quote.grand_total == Decimal("1502")
    assert quote.line_count == 2


def test_defaults() -> None:
    """Without arguments the tax rate is 20% and shipping is free."""
    quote = assemble_quote([_line("100")])
    assert quote.tax_rate == Decimal("0.20")
    assert quote.grand_total == Decimal("120")


def test_empty_order() -> None:
    """An empty order still pays shipping."""
    quote = assemble_quote([], "0.2", 200)
    assert quote.subtotal == 0
    assert quote.tax_amount == 0
    assert quote.grand_total == Decimal("200")
    assert quote.line_count == 0


def test_quote_is_additive_over_lines() -> None:
    """Changing one line by delta moves the total by delta * (1 + tax)."""
    rate = Decimal("0.20")
    before = assemble_quote([_line("960"), _line("400")], rate, 100)
    after = assemble_quote([_line("960"), _line("437.5")], rate, 100)

    delta = Decimal("37.5")
    assert after.subtotal - before.subtotal == delta
    assert after.grand_total - before.grand_total == delta * (1 + rate)


def test_no_discounts_at_order_level(custom_glass: ProductPricingDescriptor) -> None:
    """Discounted lines are summed as-is, never discounted again."""
    line = compute_price(custom_glass, DimensionRequest(10, width_cm=100, height_cm=120), CommercialContext("wholesale"))
    quote = assemble_quote([line], 0, 0)
    assert quote.subtotal == line.final_price == Decimal("7344")
    assert quote.grand_total == Decimal("7344")


def test_accepts_generator() -> None:
    """Lines may be any iterable."""
    quote = assemble_quote((_line(p) for p in ("1", "2", "3")), 0, 0)
    assert quote.subtotal == Decimal("6")
    assert quote.line_count == 3


def test_unrounded_intermediate_values() -> None:
    """Totals keep full precision until presentation."""
    quote = assemble_quote([_line("0.333"), _line("0.333")], "0.2", 0)
    assert quote.tax_amount == Decimal("0.1332")
    assert quote.to_dict()["grand_total"] == "0.80"


@pytest.mark.parametrize("tax_rate,shipping", [(-0.1, 0), (0.2, -5), ("abc", 0)])
def test_invalid_inputs(tax_rate: object, shipping: object) -> None:
    """Negative or non-numeric tax and shipping are rejected."""
    with pytest.raises(InvalidPriceInputError):
        assemble_quote([_line("10")], tax_rate, shipping)
