"""Price estimates for made-to-order decorative mirrors."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from .constraints import NumericConstraint
from .errors import InvalidConfigFormatError, InvalidDimensionError
from .logging import LogEvent, log_debug
from .pricing import SQ_CM_PER_M2, setting_decimal

DEFAULT_FRAME_FACTORS = {
    "frameless": Decimal("1.0"),
    "thin_metal": Decimal("1.2"),
    "solid_wood": Decimal("1.4"),
    "ornate": Decimal("1.6"),
    "led_backlit": Decimal("1.8"),
}


@dataclass(frozen=True)
class MirrorSettings:
    """Pricing constants of the custom mirror configurator."""

    base_price_m2: Decimal = Decimal(800)
    minimum_price: Decimal = Decimal(300)
    min_dimension_cm: Decimal = Decimal(30)
    max_dimension_cm: Decimal = Decimal(300)
    frame_factors: Dict[str, Decimal] = field(default_factory=lambda: dict(DEFAULT_FRAME_FACTORS))

    def __post_init__(self) -> None:
        for name in ("base_price_m2", "minimum_price", "min_dimension_cm", "max_dimension_cm"):
            converted = setting_decimal(name, getattr(self, name))
            if converted < 0:
                raise InvalidConfigFormatError(f"{name} must be non-negative", expected_type="number")
            object.__setattr__(self, name, converted)
        if self.min_dimension_cm > self.max_dimension_cm:
            raise InvalidConfigFormatError("min_dimension_cm must not exceed max_dimension_cm", expected_type="number")

        if not isinstance(self.frame_factors, dict):
            raise InvalidConfigFormatError("frame_factors must be a mapping of frame type to factor")
        factors = {}
        for frame, factor in self.frame_factors.items():
            converted = setting_decimal(f"frame_factors.{frame}", factor)
            if converted < 0:
                raise InvalidConfigFormatError(f"Frame factor for '{frame}' must be non-negative", expected_type="number")
            factors[str(frame)] = converted
        object.__setattr__(self, "frame_factors", factors)


@dataclass(frozen=True)
class MirrorEstimate:
    """Estimated price of a custom mirror, rounded to whole currency units."""

    area_m2: Decimal
    frame_type: str
    frame_factor: Decimal
    price: Decimal
    minimum_applied: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "area_m2": str(self.area_m2),
            "frame_type": self.frame_type,
            "frame_factor": str(self.frame_factor),
            "price": str(self.price),
            "minimum_applied": self.minimum_applied,
        }


def estimate_custom_mirror(
    width_cm: Any,
    height_cm: Any,
    frame_type: str = "frameless",
    settings: Optional[MirrorSettings] = None,
) -> MirrorEstimate:
    """Estimate the price of a custom mirror.

    Unknown frame types are priced with a factor of 1.

    Raises:
        InvalidDimensionError: If a dimension is outside the configurator range
    """
    settings = settings or MirrorSettings()
    bounds = NumericConstraint(
        min_value=settings.min_dimension_cm,
        max_value=settings.max_dimension_cm,
        description="Mirror dimension in centimeters",
        error_type=InvalidDimensionError,
    )
    width = bounds.validate("width_cm", width_cm)
    height = bounds.validate("height_cm", height_cm)

    factor = settings.frame_factors.get(frame_type)
    if factor is None:
        log_debug(LogEvent.MIRROR, f"Unknown frame type '{frame_type}', using factor 1", frame_type=frame_type)
        factor = Decimal(1)

    area = (width * height) / SQ_CM_PER_M2
    price = (area * settings.base_price_m2 * factor).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    minimum_applied = price < settings.minimum_price
    if minimum_applied:
        price = settings.minimum_price

    return MirrorEstimate(
        area_m2=area,
        frame_type=frame_type,
        frame_factor=factor,
        price=price,
        minimum_applied=minimum_applied,
    )
