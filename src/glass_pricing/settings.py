"""Configuration loading for the pricing engine.

Pricing rules, tax rate and shipping zones live in two YAML files resolved by
:mod:`glass_pricing.config_paths`. Typical usage:

    from glass_pricing import PricingConfig

    config = PricingConfig.get_default()
    breakdown = config.engine.compute_price(product, request, context)
    shipping = config.resolve_shipping("Rabat")
    quote = config.assemble_quote([breakdown], shipping.cost)
"""

import threading
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from .config_paths import (
    ENV_PRICING_CONFIG,
    ENV_SHIPPING_ZONES,
    PRICING_CONFIG_FILENAME,
    SHIPPING_ZONES_FILENAME,
    ConfigSource,
    locate_config,
)
from .config_result import ConfigResult
from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigFormatError,
    PricingValidationError,
)
from .logging import LogEvent, log_debug, log_error, log_info
from .mirror import MirrorSettings
from .models import OrderQuote, ShippingQuote, ShippingZone
from .pricing import PricingEngine, PricingPolicy
from .quote import DEFAULT_TAX_RATE, PricedLine, assemble_quote
from .shipping import DEFAULT_SHIPPING_COST, ShippingZoneTable


def load_yaml_file(path: str, source: Optional[ConfigSource] = None) -> ConfigResult:
    """Read a YAML mapping from disk.

    Args:
        path: Path to the YAML file
        source: Where the path was found, carried on the result

    Returns:
        ConfigResult: Result of the loading operation
    """
    file_path = Path(path)
    if not file_path.is_file():
        error_msg = f"Configuration file not found: {path}"
        log_error(LogEvent.CONFIG, error_msg, path=path)
        return ConfigResult(False, error=error_msg, exception=FileNotFoundError(path), path=path, source=source)

    try:
        content = file_path.read_text(encoding="utf-8")
        if not content.strip():
            error_msg = f"Configuration file is empty: {path}"
            log_error(LogEvent.CONFIG, error_msg, path=path)
            return ConfigResult(False, error=error_msg, path=path, source=source)

        data = yaml.safe_load(content)
        if not isinstance(data, dict):
            error_msg = f"Invalid configuration format in {path}: expected dictionary, got {type(data).__name__}"
            log_error(LogEvent.CONFIG, error_msg, path=path)
            return ConfigResult(False, error=error_msg, path=path, source=source)

        return ConfigResult(True, data=data, path=path, source=source)
    except yaml.YAMLError as e:
        error_msg = f"YAML parsing error in {path}: {e}"
        log_error(LogEvent.CONFIG, error_msg, path=path)
        return ConfigResult(False, error=error_msg, exception=e, path=path, source=source)
    except OSError as e:
        error_msg = f"Error reading {path}: {e}"
        log_error(LogEvent.CONFIG, error_msg, path=path)
        return ConfigResult(False, error=error_msg, exception=e, path=path, source=source)


def _require(result: ConfigResult) -> Dict[str, Any]:
    if result.success and result.data is not None:
        return result.data
    if result.missing:
        raise ConfigFileNotFoundError(result.error or "Configuration file not found", result.path)
    raise InvalidConfigFormatError(result.error or "Invalid configuration", result.path)


def _section(data: Dict[str, Any], key: str, path: Optional[str]) -> Dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise InvalidConfigFormatError(f"'{key}' must be a mapping", path)
    return section


def parse_pricing_data(data: Dict[str, Any], path: Optional[str] = None) -> Dict[str, Any]:
    """Build the policy, tax rate, currency and mirror settings from a pricing mapping.

    Raises:
        InvalidConfigFormatError: If any value is missing its expected shape
    """
    try:
        policy = PricingPolicy(**_section(data, "policy", path))
        mirror = MirrorSettings(**_section(data, "mirror", path))
    except TypeError as e:
        raise InvalidConfigFormatError(f"Unknown pricing setting: {e}", path) from e
    except InvalidConfigFormatError as e:
        raise InvalidConfigFormatError(e.message, path, e.expected_type) from e

    raw_rate = data.get("tax_rate", DEFAULT_TAX_RATE)
    try:
        tax_rate = Decimal(str(raw_rate))
    except ArithmeticError:
        raise InvalidConfigFormatError(f"tax_rate must be a number, got {raw_rate!r}", path, "number") from None
    if isinstance(raw_rate, bool) or not tax_rate.is_finite() or tax_rate < 0:
        raise InvalidConfigFormatError(f"tax_rate must be a non-negative number, got {raw_rate!r}", path, "number")

    currency = str(data.get("currency", "MAD"))
    return {"policy": policy, "mirror": mirror, "tax_rate": tax_rate, "currency": currency}


def parse_zone_data(data: Dict[str, Any], path: Optional[str] = None) -> ShippingZoneTable:
    """Build a shipping zone table from a zones mapping.

    Raises:
        InvalidConfigFormatError: If a zone entry is malformed or duplicated
    """
    entries = data.get("zones") or []
    if not isinstance(entries, list):
        raise InvalidConfigFormatError("'zones' must be a list", path, "list")

    zones = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise InvalidConfigFormatError(f"Shipping zone must be a mapping, got {entry!r}", path)
        try:
            zones.append(ShippingZone(city=entry["city"], cost=entry["cost"], delivery_days=entry["delivery_days"]))
        except KeyError as e:
            raise InvalidConfigFormatError(f"Shipping zone is missing {e}", path) from e
        except PricingValidationError as e:
            raise InvalidConfigFormatError(f"Invalid shipping zone {entry!r}: {e.message}", path) from e

    try:
        return ShippingZoneTable(
            zones,
            default_cost=data.get("default_cost", DEFAULT_SHIPPING_COST),
            normalize_case=bool(data.get("normalize_case", False)),
        )
    except PricingValidationError as e:
        raise InvalidConfigFormatError(e.message, path, "number") from e
    except InvalidConfigFormatError as e:
        raise InvalidConfigFormatError(e.message, path, e.expected_type) from e


class PricingConfig:
    """Loaded pricing configuration: policy, tax, currency, mirror settings and zones."""

    _default_instance: Optional["PricingConfig"] = None
    _instance_lock = threading.RLock()

    @classmethod
    def get_default(cls) -> "PricingConfig":
        """Get the default configuration instance, loaded from the resolved paths.

        Returns:
            The shared PricingConfig instance
        """
        with cls._instance_lock:
            if cls._default_instance is None:
                cls._default_instance = cls()
            return cls._default_instance

    @staticmethod
    def cleanup() -> None:
        """Drop the shared instance so the next call reloads from disk."""
        with PricingConfig._instance_lock:
            PricingConfig._default_instance = None

    def __init__(self, pricing_path: Optional[str] = None, zones_path: Optional[str] = None):
        """Load configuration.

        Args:
            pricing_path: Custom path to the pricing YAML file. If None, the
                          resolved default location is used.
            zones_path: Custom path to the shipping zones YAML file. If None,
                        the resolved default location is used.

        Raises:
            ConfigFileNotFoundError: If a configuration file does not exist
            InvalidConfigFormatError: If a configuration file is malformed
        """
        pricing_location = locate_config(ENV_PRICING_CONFIG, PRICING_CONFIG_FILENAME, pricing_path)
        zones_location = locate_config(ENV_SHIPPING_ZONES, SHIPPING_ZONES_FILENAME, zones_path)
        self.pricing_path = pricing_location.path
        self.zones_path = zones_location.path
        self.sources = {"pricing": pricing_location.source, "zones": zones_location.source}

        pricing = parse_pricing_data(
            _require(load_yaml_file(self.pricing_path, pricing_location.source)), self.pricing_path
        )
        self.policy: PricingPolicy = pricing["policy"]
        self.mirror: MirrorSettings = pricing["mirror"]
        self.tax_rate: Decimal = pricing["tax_rate"]
        self.currency: str = pricing["currency"]

        self.zones = parse_zone_data(_require(load_yaml_file(self.zones_path, zones_location.source)), self.zones_path)
        self.engine = PricingEngine(self.policy)

        log_info(
            LogEvent.CONFIG,
            "Loaded pricing configuration",
            pricing_path=self.pricing_path,
            zones_path=self.zones_path,
            sources={k: v.value for k, v in self.sources.items()},
            zones=len(self.zones),
        )

    def resolve_shipping(self, city: str) -> ShippingQuote:
        """Resolve shipping for a city against the configured zones."""
        return self.zones.resolve(city)

    def assemble_quote(self, lines: Iterable[PricedLine], shipping_cost: Any = 0) -> OrderQuote:
        """Assemble an order quote with the configured tax rate and currency."""
        return assemble_quote(lines, self.tax_rate, shipping_cost, currency=self.currency)

    def quote_for_city(self, lines: Iterable[PricedLine], city: str) -> OrderQuote:
        """Assemble an order quote shipped to ``city``."""
        shipping = self.resolve_shipping(city)
        log_debug(LogEvent.QUOTE, "Quoting order", city=city, shipping=str(shipping.cost))
        return self.assemble_quote(lines, shipping.cost)

    def get_info(self) -> Dict[str, Any]:
        """Describe the effective configuration."""
        return {
            "pricing_path": self.pricing_path,
            "zones_path": self.zones_path,
            "sources": {k: v.value for k, v in self.sources.items()},
            "currency": self.currency,
            "tax_rate": str(self.tax_rate),
            "policy": {
                "min_dimension_cm": str(self.policy.min_dimension_cm),
                "max_dimension_cm": str(self.policy.max_dimension_cm),
                "minimum_area_fraction": str(self.policy.minimum_area_fraction),
                "wholesale_discount": str(self.policy.wholesale_discount),
                "volume_discount": str(self.policy.volume_discount),
                "volume_threshold_m2": str(self.policy.volume_threshold_m2),
                "dimension_policy": self.policy.dimension_policy.value,
            },
            "default_shipping_cost": str(self.zones.default_cost),
            "zone_count": len(self.zones),
        }


def get_config() -> PricingConfig:
    """Get the default pricing configuration.

    Returns:
        The singleton PricingConfig instance
    """
    return PricingConfig.get_default()
