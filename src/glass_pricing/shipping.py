"""Shipping cost lookup by destination city."""

from decimal import Decimal
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from .constraints import NumericConstraint
from .errors import InvalidConfigFormatError, InvalidPriceInputError
from .logging import LogEvent, log_debug
from .models import ShippingQuote, ShippingZone

DEFAULT_SHIPPING_COST = Decimal(200)

# Reference zones used when no configuration is supplied
REFERENCE_ZONES = (
    ShippingZone("Rabat", Decimal(50), 1),
    ShippingZone("Casablanca", Decimal(100), 2),
    ShippingZone("Témara", Decimal(30), 1),
    ShippingZone("Tanger", Decimal(150), 3),
    ShippingZone("Marrakech", Decimal(150), 3),
)


class ShippingZoneTable:
    """Lookup table of shipping zones keyed by city.

    Matching is exact and case-sensitive unless the table is built with
    ``normalize_case=True``, in which case names are stripped and case-folded
    on both sides.
    """

    def __init__(
        self,
        zones: Iterable[ShippingZone] = REFERENCE_ZONES,
        default_cost: Any = DEFAULT_SHIPPING_COST,
        normalize_case: bool = False,
    ):
        """Initialize the table.

        Args:
            zones: Shipping zones, unique per city
            default_cost: Cost returned for cities absent from the table
            normalize_case: Whether to match on normalized city names

        Raises:
            InvalidConfigFormatError: If two zones share a city
            InvalidPriceInputError: If the default cost is negative
        """
        self.normalize_case = normalize_case
        self.default_cost = NumericConstraint(
            min_value=0,
            description="Default national shipping cost",
            error_type=InvalidPriceInputError,
        ).validate("default_cost", default_cost)
        self._zones: Dict[str, ShippingZone] = {}
        for zone in zones:
            key = self._key(zone.city)
            if key in self._zones:
                raise InvalidConfigFormatError(f"Duplicate shipping zone for city '{zone.city}'", expected_type="list")
            self._zones[key] = zone

    def _key(self, city: str) -> str:
        if self.normalize_case:
            return city.strip().casefold()
        return city

    def __len__(self) -> int:
        return len(self._zones)

    def __iter__(self) -> Iterator[ShippingZone]:
        return iter(self._zones.values())

    def __contains__(self, city: object) -> bool:
        return isinstance(city, str) and self._key(city) in self._zones

    @property
    def zones(self) -> List[ShippingZone]:
        return list(self._zones.values())

    def get(self, city: str) -> Optional[ShippingZone]:
        """Return the zone for a city, or None."""
        if not isinstance(city, str):
            return None
        return self._zones.get(self._key(city))

    def resolve(self, city: str) -> ShippingQuote:
        """Resolve the shipping cost for a city, falling back to the default cost."""
        zone = self.get(city)
        if zone is None:
            log_debug(
                LogEvent.SHIPPING,
                f"No shipping zone for '{city}', using default cost",
                city=city,
                cost=str(self.default_cost),
            )
            return ShippingQuote(city=city, cost=self.default_cost, delivery_days=None, matched=False)
        return ShippingQuote(city=zone.city, cost=zone.cost, delivery_days=zone.delivery_days, matched=True)


def resolve_shipping(
    city: str,
    zones: Union[ShippingZoneTable, Iterable[ShippingZone], None] = None,
) -> ShippingQuote:
    """Resolve shipping for a city against a zone table.

    Args:
        city: Destination city
        zones: A ShippingZoneTable, a plain iterable of zones (exact matching,
               default cost 200) or None for the reference table

    Returns:
        The resolved ShippingQuote
    """
    if zones is None:
        table = ShippingZoneTable()
    elif isinstance(zones, ShippingZoneTable):
        table = zones
    else:
        table = ShippingZoneTable(zones)
    return table.resolve(city)
