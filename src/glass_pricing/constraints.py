"""Input constraints for the pricing engine.

This module defines the numeric conversion and range checks applied to
prices, dimensions and rates before they enter a computation.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Type

from .errors import (
    InvalidDimensionError,
    InvalidPriceInputError,
    InvalidQuantityError,
    PricingValidationError,
)


def to_decimal(
    name: str,
    value: Any,
    error_type: Type[PricingValidationError] = InvalidPriceInputError,
) -> Decimal:
    """Convert a numeric input to ``Decimal``.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Args:
        name: Input name for error messages
        value: Value to convert (int, float, str or Decimal)
        error_type: Validation error class to raise

    Returns:
        The converted value

    Raises:
        PricingValidationError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise error_type(f"'{name}' must be a number, got bool", name, value)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            raise error_type(f"'{name}' must be a finite number, got {value}", name, value)
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise error_type(f"'{name}' must be a number, got {value!r}", name, value) from None
    else:
        raise error_type(f"'{name}' must be a number, got {type(value).__name__}", name, value)

    if not result.is_finite():
        raise error_type(f"'{name}' must be a finite number, got {value}", name, value)
    return result


class NumericConstraint:
    """Closed range constraint for numeric inputs."""

    def __init__(
        self,
        min_value: Any = 0,
        max_value: Optional[Any] = None,
        description: str = "",
        error_type: Type[PricingValidationError] = InvalidPriceInputError,
    ):
        """Initialize numeric constraint.

        Args:
            min_value: Minimum allowed value
            max_value: Maximum allowed value, or None for no upper limit
            description: Description of the input
            error_type: Validation error class raised on failure
        """
        self.min_value = Decimal(str(min_value))
        self.max_value = Decimal(str(max_value)) if max_value is not None else None
        self.description = description
        self.error_type = error_type

    def _error(self, message: str, name: str, value: Any) -> PricingValidationError:
        if issubclass(self.error_type, InvalidDimensionError):
            return self.error_type(
                message,
                name,
                value,
                min_value=float(self.min_value),
                max_value=float(self.max_value) if self.max_value is not None else None,
            )
        return self.error_type(message, name, value)

    def contains(self, value: Decimal) -> bool:
        """Return whether an already converted value lies within the range."""
        if value < self.min_value:
            return False
        return self.max_value is None or value <= self.max_value

    def validate(self, name: str, value: Any) -> Decimal:
        """Validate a value against this constraint.

        Args:
            name: Input name for error messages
            value: Value to validate

        Returns:
            The value as ``Decimal``

        Raises:
            PricingValidationError: If validation fails
        """
        converted = to_decimal(name, value, self.error_type)
        if not self.contains(converted):
            max_desc = str(self.max_value) if self.max_value is not None else "unlimited"
            raise self._error(
                f"'{name}' must be between {self.min_value} and {max_desc}.\n"
                f"Description: {self.description}\n"
                f"Current value: {value}",
                name,
                value,
            )
        return converted

    def clamp(self, name: str, value: Any) -> Decimal:
        """Convert a value and pull it back inside the range.

        Args:
            name: Input name for error messages
            value: Value to clamp

        Returns:
            The clamped value as ``Decimal``

        Raises:
            PricingValidationError: If the value is not a number at all
        """
        converted = to_decimal(name, value, self.error_type)
        if converted < self.min_value:
            return self.min_value
        if self.max_value is not None and converted > self.max_value:
            return self.max_value
        return converted


def validate_quantity(value: Any) -> int:
    """Validate an item quantity.

    Raises:
        InvalidQuantityError: If the quantity is not an integer of at least 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantityError(
            f"'quantity' must be an integer, got {type(value).__name__}",
            "quantity",
            value,
        )
    if value < 1:
        raise InvalidQuantityError(f"'quantity' must be at least 1, got {value}", "quantity", value)
    return value
