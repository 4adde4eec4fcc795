#!/usr/bin/env python3
"""Example of basic pricing engine usage."""

from glass_pricing import (
    Cart,
    CommercialContext,
    DimensionRequest,
    PricingConfig,
    PricingValidationError,
    ProductPricingDescriptor,
    estimate_custom_mirror,
)


def print_line(config, product, request, role):
    """Print the breakdown of one order line.

    Args:
        config: Loaded pricing configuration
        product: Product being priced
        request: Quantity and dimensions
        role: Buyer role
    """
    breakdown = config.engine.compute_price(product, request, CommercialContext(role))
    print(f"{product.name} x{request.quantity} ({role})")
    print(f"  Area per piece: {breakdown.area_m2} m²")
    print(f"  Before discounts: {breakdown.raw_total}")
    print(f"  Wholesale discount: {breakdown.wholesale_discount_applied}")
    print(f"  Volume discount: {breakdown.volume_discount_applied}")
    print(f"  Final price: {breakdown.rounded_final_price()} {config.currency}")
    print()
    return breakdown


def main():
    """Run the example."""
    config = PricingConfig.get_default()
    glass = ProductPricingDescriptor(800, is_customizable=True, product_id="clear-6mm", name="Clear glass 6mm")
    mirror = ProductPricingDescriptor(250, is_customizable=False, product_id="mirror-round-60", name="Round mirror")

    cart = Cart()
    cart.add_priced(glass, print_line(config, glass, DimensionRequest(10, width_cm=100, height_cm=120), "wholesale"))
    cart.add_priced(mirror, print_line(config, mirror, DimensionRequest(2), "wholesale"))

    shipping = config.resolve_shipping("Casablanca")
    quote = config.assemble_quote(cart.lines, shipping.cost)
    print("Order quote to Casablanca:")
    for key, value in quote.to_dict().items():
        print(f"  {key}: {value}")
    print()

    estimate = estimate_custom_mirror(80, 120, "thin_metal", config.mirror)
    print(f"Custom 80 x 120 mirror, thin metal frame: {estimate.price} {config.currency}")
    print()

    print("Validation examples:")
    try:
        config.engine.compute_price(glass, DimensionRequest(1, width_cm=10, height_cm=120))
        print("  ✓ 10 x 120 cm is valid")
    except PricingValidationError as e:
        print(f"  ❌ {e.message.splitlines()[0]}")


if __name__ == "__main__":
    main()
