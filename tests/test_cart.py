"""Tests for the shopping cart."""

from decimal import Decimal

import pytest

from glass_pricing.cart import Cart
from glass_pricing.errors import InvalidDimensionError, InvalidPriceInputError, InvalidQuantityError
from glass_pricing.models import CommercialContext, DimensionRequest, ProductPricingDescriptor
from glass_pricing.pricing import compute_price


def test_add_priced_line(custom_glass: ProductPricingDescriptor) -> None:
    """Lines priced by the engine keep their breakdown and dimensions."""
    cart = Cart()
    breakdown = compute_price(custom_glass, DimensionRequest(2, width_cm=100, height_cm=120), CommercialContext())
    line = cart.add_priced(custom_glass, breakdown)

    assert line.product_id == "clear-6mm"
    assert line.quantity == 2
    assert line.final_price == Decimal("1920")
    assert line.width_cm == Decimal(100)
    assert line.breakdown is breakdown
    assert cart.count == 1


def test_add_item_price_fallback() -> None:
    """Items without a computed price cost unit price times quantity."""
    cart = Cart()
    line = cart.add_item("mirror-round-60", 3, unit_price=250)
    assert line.final_price == Decimal("750")

    zero = cart.add_item("mirror-round-60", 2, unit_price=250, price=0)
    assert zero.final_price == Decimal("500")

    explicit = cart.add_item("custom-mirror", 1, unit_price=0, price=1152, width_cm=80, height_cm=120,
                             options={"frame": "thin_metal"})
    assert explicit.final_price == Decimal("1152")
    assert explicit.options == {"frame": "thin_metal"}
    assert explicit.height_cm == Decimal(120)


def test_subtotal_remove_and_clear() -> None:
    """Cart totals follow its lines."""
    cart = Cart()
    cart.add_item("a", 1, unit_price=100)
    cart.add_item("b", 2, unit_price=50)
    cart.add_item("c", 1, unit_price="19.99")
    assert cart.subtotal == Decimal("219.99")

    removed = cart.remove(1)
    assert removed.product_id == "b"
    assert [line.product_id for line in cart.lines] == ["a", "c"]
    assert cart.subtotal == Decimal("119.99")

    with pytest.raises(IndexError):
        cart.remove(5)

    cart.clear()
    assert cart.count == 0
    assert cart.subtotal == Decimal(0)


def test_cart_quote() -> None:
    """Carts hand their lines to the quote assembler."""
    cart = Cart()
    cart.add_item("a", 1, unit_price=1000)
    quote = cart.quote(tax_rate="0.2", shipping_cost=150)

    assert quote.subtotal == Decimal("1000")
    assert quote.grand_total == Decimal("1350")
    assert quote.line_count == 1


def test_lines_are_a_copy() -> None:
    """Mutating the returned list does not touch the cart."""
    cart = Cart()
    cart.add_item("a", 1, unit_price=10)
    cart.lines.clear()
    assert cart.count == 1


def test_invalid_items() -> None:
    """Bad quantities and prices are rejected."""
    cart = Cart()
    with pytest.raises(InvalidQuantityError):
        cart.add_item("a", 0, unit_price=10)
    with pytest.raises(InvalidPriceInputError):
        cart.add_item("a", 1, unit_price=-10)
    assert cart.count == 0


@pytest.mark.parametrize("width", ["abc", "nan", float("inf"), True])
def test_invalid_item_dimensions(width: object) -> None:
    """Dimensions on explicit items must be finite numbers."""
    cart = Cart()
    with pytest.raises(InvalidDimensionError) as exc_info:
        cart.add_item("custom-mirror", 1, unit_price=10, width_cm=width, height_cm=100)
    assert exc_info.value.param_name == "width_cm"
    assert cart.count == 0


def test_remove_negative_index() -> None:
    """Negative indexes do not reach from the end of the cart."""
    cart = Cart()
    cart.add_item("a", 1, unit_price=10)
    cart.add_item("b", 1, unit_price=20)
    with pytest.raises(IndexError):
        cart.remove(-1)
    assert [line.product_id for line in cart.lines] == ["a", "b"]
