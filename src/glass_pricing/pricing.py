"""Price computation for catalog glass products.

Typical usage:

    from glass_pricing import CommercialContext, DimensionRequest, ProductPricingDescriptor, compute_price

    product = ProductPricingDescriptor(unit_area_price=800, is_customizable=True)
    breakdown = compute_price(product, DimensionRequest(quantity=1, width_cm=100, height_cm=120), CommercialContext())
    breakdown.final_price  # Decimal("960.0")

The engine holds no state besides its policy; every call builds a fresh
``PriceBreakdown``.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Tuple

from .constraints import NumericConstraint
from .errors import InvalidConfigFormatError, InvalidDimensionError
from .logging import LogEvent, log_debug, log_warning
from .models import (
    CommercialContext,
    CommercialRole,
    DimensionRequest,
    PriceBreakdown,
    ProductPricingDescriptor,
)

SQ_CM_PER_M2 = Decimal(10000)
ONE = Decimal(1)


class DimensionPolicy(str, Enum):
    """What to do with custom dimensions outside the allowed range."""

    REJECT = "reject"
    CLAMP = "clamp"


@dataclass(frozen=True)
class PricingPolicy:
    """Constants of the pricing rules.

    - min_dimension_cm / max_dimension_cm: allowed custom cut size
    - minimum_area_fraction: floor of a custom piece, as a fraction of one m²
    - wholesale_discount: reduction for wholesale accounts
    - volume_discount / volume_threshold_m2: reduction when a custom line exceeds the area
    """

    min_dimension_cm: Decimal = Decimal(20)
    max_dimension_cm: Decimal = Decimal(300)
    minimum_area_fraction: Decimal = Decimal("0.5")
    wholesale_discount: Decimal = Decimal("0.15")
    volume_discount: Decimal = Decimal("0.10")
    volume_threshold_m2: Decimal = Decimal(10)
    dimension_policy: DimensionPolicy = DimensionPolicy.REJECT

    def __post_init__(self) -> None:
        for name in (
            "min_dimension_cm",
            "max_dimension_cm",
            "minimum_area_fraction",
            "wholesale_discount",
            "volume_discount",
            "volume_threshold_m2",
        ):
            object.__setattr__(self, name, setting_decimal(name, getattr(self, name)))

        try:
            object.__setattr__(self, "dimension_policy", DimensionPolicy(self.dimension_policy))
        except ValueError:
            raise InvalidConfigFormatError(
                f"dimension_policy must be one of: {', '.join(p.value for p in DimensionPolicy)}",
                expected_type="str",
            ) from None

        if self.min_dimension_cm <= 0 or self.min_dimension_cm > self.max_dimension_cm:
            raise InvalidConfigFormatError(
                f"Invalid dimension range {self.min_dimension_cm}-{self.max_dimension_cm} cm",
                expected_type="number",
            )
        for name in ("wholesale_discount", "volume_discount"):
            rate = getattr(self, name)
            if rate < 0 or rate >= 1:
                raise InvalidConfigFormatError(f"{name} must be in [0, 1), got {rate}", expected_type="number")
        if self.minimum_area_fraction < 0:
            raise InvalidConfigFormatError("minimum_area_fraction must be non-negative", expected_type="number")
        if self.volume_threshold_m2 < 0:
            raise InvalidConfigFormatError("volume_threshold_m2 must be non-negative", expected_type="number")

    @property
    def dimension_constraint(self) -> NumericConstraint:
        return NumericConstraint(
            min_value=self.min_dimension_cm,
            max_value=self.max_dimension_cm,
            description="Custom cut dimension in centimeters",
            error_type=InvalidDimensionError,
        )


def setting_decimal(name: str, value: Any) -> Decimal:
    """Convert a configured constant to a finite ``Decimal``.

    Raises:
        InvalidConfigFormatError: If the value is not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise InvalidConfigFormatError(f"{name} must be a number, got {value!r}", expected_type="number")
    try:
        converted = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except ArithmeticError:
        raise InvalidConfigFormatError(f"{name} must be a number, got {value!r}", expected_type="number") from None
    if not converted.is_finite():
        raise InvalidConfigFormatError(f"{name} must be a finite number, got {value!r}", expected_type="number")
    return converted


DEFAULT_POLICY = PricingPolicy()


def _qualifies_for_wholesale(role: CommercialRole) -> bool:
    if role is CommercialRole.WHOLESALE:
        return True
    if role is CommercialRole.CUSTOMER or role is CommercialRole.ADMIN:
        return False
    raise AssertionError(f"Unhandled commercial role: {role!r}")


class PricingEngine:
    """Computes line prices under a fixed pricing policy."""

    def __init__(self, policy: Optional[PricingPolicy] = None):
        """Initialize the engine.

        Args:
            policy: Pricing constants. If None, the reference policy is used.
        """
        self.policy = policy or DEFAULT_POLICY

    def _resolve_dimensions(self, dimensions: DimensionRequest) -> Tuple[Decimal, Decimal]:
        """Apply the dimension policy to a custom cut request.

        Raises:
            InvalidDimensionError: If a dimension is missing, or out of range under ``reject``
        """
        constraint = self.policy.dimension_constraint
        resolved = []
        for name in ("width_cm", "height_cm"):
            value = getattr(dimensions, name)
            if value is None:
                raise InvalidDimensionError(
                    f"'{name}' is required for customizable products",
                    name,
                    value,
                    min_value=float(self.policy.min_dimension_cm),
                    max_value=float(self.policy.max_dimension_cm),
                )
            if self.policy.dimension_policy is DimensionPolicy.CLAMP:
                clamped = constraint.clamp(name, value)
                if clamped != value:
                    log_warning(
                        LogEvent.PRICING,
                        f"Clamped {name} from {value} to {clamped}",
                        param=name,
                        requested=str(value),
                        clamped=str(clamped),
                    )
                resolved.append(clamped)
            else:
                resolved.append(constraint.validate(name, value))
        return resolved[0], resolved[1]

    def compute_price(
        self,
        descriptor: ProductPricingDescriptor,
        dimensions: DimensionRequest,
        context: Optional[CommercialContext] = None,
    ) -> PriceBreakdown:
        """Compute the price of one cart line.

        Args:
            descriptor: Product pricing descriptor
            dimensions: Requested quantity and dimensions
            context: Commercial context of the buyer; defaults to a customer

        Returns:
            A new PriceBreakdown

        Raises:
            InvalidDimensionError: If custom dimensions are missing or rejected
        """
        context = context or CommercialContext()
        policy = self.policy
        quantity = dimensions.quantity
        width: Optional[Decimal] = None
        height: Optional[Decimal] = None

        if descriptor.is_customizable:
            width, height = self._resolve_dimensions(dimensions)
            area_m2 = (width * height) / SQ_CM_PER_M2
            unit_price = area_m2 * descriptor.unit_area_price
            # Minimum cut charge
            floor = policy.minimum_area_fraction * descriptor.unit_area_price
            if unit_price < floor:
                unit_price = floor
        else:
            area_m2 = Decimal(0)
            unit_price = descriptor.unit_area_price

        raw_total = unit_price * quantity
        price = raw_total

        wholesale = _qualifies_for_wholesale(context.role)
        if wholesale:
            price = price * (ONE - policy.wholesale_discount)

        volume = descriptor.is_customizable and area_m2 * quantity > policy.volume_threshold_m2
        if volume:
            price = price * (ONE - policy.volume_discount)

        log_debug(
            LogEvent.PRICING,
            "Computed line price",
            product_id=descriptor.product_id,
            area_m2=str(area_m2),
            quantity=quantity,
            role=context.role.value,
            raw_total=str(raw_total),
            final_price=str(price),
        )

        return PriceBreakdown(
            area_m2=area_m2,
            base_unit_price=unit_price,
            raw_total=raw_total,
            wholesale_discount_applied=wholesale,
            volume_discount_applied=volume,
            final_price=price,
            quantity=quantity,
            width_cm=width,
            height_cm=height,
        )


def compute_price(
    descriptor: ProductPricingDescriptor,
    dimensions: DimensionRequest,
    context: Optional[CommercialContext] = None,
    policy: Optional[PricingPolicy] = None,
) -> PriceBreakdown:
    """Compute a line price with the given (or reference) policy."""
    return PricingEngine(policy).compute_price(descriptor, dimensions, context)
