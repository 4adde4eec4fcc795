"""Shared fixtures for the pricing engine tests."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest
import yaml

from glass_pricing.logging import LOGGER_NAME
from glass_pricing.models import ProductPricingDescriptor
from glass_pricing.settings import PricingConfig


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset configuration and logging state around each test."""
    monkeypatch.delenv("GLASS_PRICING_CONFIG_PATH", raising=False)
    monkeypatch.delenv("GLASS_SHIPPING_ZONES_PATH", raising=False)
    monkeypatch.setattr(
        "glass_pricing.config_paths.platformdirs.user_config_dir",
        lambda app_name: str(tmp_path / "user-config" / app_name),
    )
    PricingConfig.cleanup()
    yield
    PricingConfig.cleanup()

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def custom_glass() -> ProductPricingDescriptor:
    """A customizable glass product at 800 per m²."""
    return ProductPricingDescriptor(unit_area_price=800, is_customizable=True, product_id="clear-6mm")


@pytest.fixture
def fixed_item() -> ProductPricingDescriptor:
    """A fixed-price item at 250 per piece."""
    return ProductPricingDescriptor(unit_area_price=250, is_customizable=False, product_id="mirror-round-60")


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, Dict[str, Any]], Path]:
    """Write a mapping to a YAML file under tmp_path and return its path."""

    def _write(name: str, data: Dict[str, Any]) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
        return path

    return _write
