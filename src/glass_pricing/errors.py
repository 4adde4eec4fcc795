"""Error types for the glass pricing engine.

This module defines the error types raised by the pricing, shipping and
quoting components, and by the configuration loader.
"""

from typing import Any, Optional


class PricingError(Exception):
    """Base class for all pricing-related errors.

    This is the parent class for all engine-specific exceptions.
    """

    pass


class PricingValidationError(PricingError):
    """Base class for input validation errors.

    This is raised when a value handed to the engine fails validation.
    """

    def __init__(self, message: str, param_name: str, value: Any) -> None:
        """Initialize validation error.

        Args:
            message: Error message
            param_name: The name of the input being validated
            value: The value that failed validation
        """
        super().__init__(message)
        self.message = message
        self.param_name = param_name
        self.value = value


class InvalidDimensionError(PricingValidationError):
    """Raised when a requested dimension is missing or out of bounds.

    Examples:
        >>> try:
        ...     compute_price(descriptor, DimensionRequest(1, 10, 100), context)
        ... except InvalidDimensionError as e:
        ...     print(f"{e.param_name} must be within {e.min_value}-{e.max_value} cm")
    """

    def __init__(
        self,
        message: str,
        param_name: str,
        value: Any,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
    ) -> None:
        """Initialize invalid dimension error.

        Args:
            message: Error message
            param_name: Either ``width_cm`` or ``height_cm``
            value: The rejected dimension
            min_value: Lower bound in centimeters
            max_value: Upper bound in centimeters
        """
        super().__init__(message, param_name, value)
        self.min_value = min_value
        self.max_value = max_value


class InvalidQuantityError(PricingValidationError):
    """Raised when a quantity is not a positive integer."""

    pass


class InvalidPriceInputError(PricingValidationError):
    """Raised when a price, tax rate or shipping cost is negative or not a number."""

    pass


class InvalidRoleError(PricingValidationError):
    """Raised when a commercial role name is not recognized."""

    pass


class ConfigurationError(PricingError):
    """Base class for problems with the pricing or shipping zone files."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            path: File the problem was found in, if known
        """
        super().__init__(message)
        self.message = message
        self.path = path


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when a required configuration file is not found.

    Examples:
        >>> try:
        ...     PricingConfig(pricing_path="/missing/pricing.yml")
        ... except ConfigFileNotFoundError as e:
        ...     print(f"Config file not found: {e.path}")
    """

    pass


class InvalidConfigFormatError(ConfigurationError):
    """Raised when configuration data has an invalid format or value."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        expected_type: str = "dict",
    ) -> None:
        """Initialize invalid format error.

        Args:
            message: Error message
            path: Optional path to the configuration file
            expected_type: Expected type of the configuration
        """
        super().__init__(message, path)
        self.expected_type = expected_type
