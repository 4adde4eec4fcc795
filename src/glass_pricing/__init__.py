"""Pricing and quoting engine for a glass and mirror storefront.

This package computes line prices for catalog glass (area-based pricing with a
minimum cut charge, wholesale and volume discounts), resolves shipping costs
by destination city, and assembles order-level quotes with tax and shipping.
"""

# Version of the package
try:
    from importlib.metadata import version as _version

    __version__ = _version("glass-pricing-engine")
except ImportError:
    raise ImportError(
        "Failed to determine package version. This package requires Python 3.9+ "
        "where importlib.metadata is available, or must be installed as a package."
    )

# Import main components for easier access
from .cart import Cart, CartLine
from .errors import (
    ConfigFileNotFoundError,
    ConfigurationError,
    InvalidConfigFormatError,
    InvalidDimensionError,
    InvalidPriceInputError,
    InvalidQuantityError,
    InvalidRoleError,
    PricingError,
    PricingValidationError,
)
from .mirror import MirrorEstimate, MirrorSettings, estimate_custom_mirror
from .models import (
    CommercialContext,
    CommercialRole,
    DimensionRequest,
    OrderQuote,
    PriceBreakdown,
    ProductPricingDescriptor,
    ShippingQuote,
    ShippingZone,
)
from .pricing import DimensionPolicy, PricingEngine, PricingPolicy, compute_price
from .quote import assemble_quote
from .settings import PricingConfig, get_config
from .shipping import ShippingZoneTable, resolve_shipping

# Define public API
__all__ = [
    # Pricing
    "PricingEngine",
    "PricingPolicy",
    "DimensionPolicy",
    "compute_price",
    "ProductPricingDescriptor",
    "DimensionRequest",
    "CommercialContext",
    "CommercialRole",
    "PriceBreakdown",
    # Shipping
    "ShippingZone",
    "ShippingZoneTable",
    "ShippingQuote",
    "resolve_shipping",
    # Quotes and carts
    "OrderQuote",
    "assemble_quote",
    "Cart",
    "CartLine",
    # Custom mirrors
    "MirrorSettings",
    "MirrorEstimate",
    "estimate_custom_mirror",
    # Configuration
    "PricingConfig",
    "get_config",
    # Errors
    "PricingError",
    "PricingValidationError",
    "InvalidDimensionError",
    "InvalidQuantityError",
    "InvalidPriceInputError",
    "InvalidRoleError",
    "ConfigurationError",
    "ConfigFileNotFoundError",
    "InvalidConfigFormatError",
]
