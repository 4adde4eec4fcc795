"""Tests for shipping cost resolution."""

from decimal import Decimal

import pytest

from glass_pricing.errors import InvalidConfigFormatError, InvalidPriceInputError
from glass_pricing.models import ShippingZone
from glass_pricing.shipping import REFERENCE_ZONES, ShippingZoneTable, resolve_shipping


@pytest.mark.parametrize(
    "city,cost,days",
    [
        ("Rabat", 50, 1),
        ("Casablanca", 100, 2),
        ("Témara", 30, 1),
        ("Tanger", 150, 3),
        ("Marrakech", 150, 3),
    ],
)
def test_reference_zones(city: str, cost: int, days: int) -> None:
    """The reference table covers five cities."""
    quote = resolve_shipping(city)
    assert quote.matched is True
    assert quote.city == city
    assert quote.cost == Decimal(cost)
    assert quote.delivery_days == days


@pytest.mark.parametrize("city", ["Fès", "Agadir", "", "Nowhere"])
def test_unknown_city_falls_back_to_default(city: str) -> None:
    """Cities outside the table pay 200 with no delivery promise."""
    quote = resolve_shipping(city)
    assert quote.matched is False
    assert quote.cost == Decimal(200)
    assert quote.delivery_days is None
    assert quote.city == city


def test_matching_is_case_sensitive_by_default() -> None:
    """Exact matching treats 'rabat' as unknown."""
    assert resolve_shipping("rabat").matched is False
    assert resolve_shipping("Rabat ").matched is False


def test_normalized_matching() -> None:
    """A normalizing table ignores case and surrounding spaces."""
    table = ShippingZoneTable(REFERENCE_ZONES, normalize_case=True)

    quote = table.resolve("  casablanca ")
    assert quote.matched is True
    assert quote.city == "Casablanca"
    assert quote.cost == Decimal(100)
    assert "TÉMARA" in table


def test_table_is_swappable() -> None:
    """A different table changes the result without changing the resolver."""
    table = ShippingZoneTable([ShippingZone("Oujda", Decimal(80), 4)], default_cost=Decimal(250))

    assert resolve_shipping("Oujda", table).cost == Decimal(80)
    assert resolve_shipping("Rabat", table).cost == Decimal(250)
    assert len(table) == 1


def test_plain_iterable_of_zones() -> None:
    """A list of zones works with exact matching and the standard default."""
    zones = [ShippingZone("Fès", Decimal(120), 2)]
    assert resolve_shipping("Fès", zones).delivery_days == 2
    assert resolve_shipping("Rabat", zones).cost == Decimal(200)


def test_duplicate_cities_are_rejected() -> None:
    """Cities must be unique."""
    with pytest.raises(InvalidConfigFormatError):
        ShippingZoneTable([ShippingZone("Rabat", 50, 1), ShippingZone("Rabat", 60, 2)])


def test_duplicates_after_normalization_are_rejected() -> None:
    """Normalized tables treat differently-cased names as duplicates."""
    zones = [ShippingZone("Rabat", 50, 1), ShippingZone("RABAT", 60, 2)]
    ShippingZoneTable(zones)
    with pytest.raises(InvalidConfigFormatError):
        ShippingZoneTable(zones, normalize_case=True)


def test_negative_default_cost() -> None:
    """The default cost must be non-negative."""
    with pytest.raises(InvalidPriceInputError):
        ShippingZoneTable(default_cost=-1)


def test_table_iteration() -> None:
    """Tables iterate over their zones in insertion order."""
    table = ShippingZoneTable()
    assert [z.city for z in table] == ["Rabat", "Casablanca", "Témara", "Tanger", "Marrakech"]
    assert table.get("Tanger") == ShippingZone("Tanger", Decimal(150), 3)
    assert table.get("Paris") is None
    assert 42 not in table


@pytest.mark.parametrize("normalize_case", [False, True])
def test_non_string_city_falls_back(normalize_case: bool) -> None:
    """A missing city name is priced at the default cost in both matching modes."""
    table = ShippingZoneTable(REFERENCE_ZONES, normalize_case=normalize_case)
    assert table.get(None) is None  # type: ignore[arg-type]
    quote = table.resolve(None)  # type: ignore[arg-type]
    assert quote.matched is False
    assert quote.cost == Decimal(200)
