"""Location of the pricing and shipping zone files.

Each file is looked up in three places, first hit wins:

1. the environment variable naming it (``GLASS_PRICING_CONFIG_PATH``,
   ``GLASS_SHIPPING_ZONES_PATH``), when it points to an existing file
2. the per-user config directory given by platformdirs
3. the defaults shipped inside the package
"""

import os
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

import platformdirs

from .logging import LogEvent, log_error, log_info

APP_NAME = "glass-pricing-engine"

ENV_PRICING_CONFIG = "GLASS_PRICING_CONFIG_PATH"
ENV_SHIPPING_ZONES = "GLASS_SHIPPING_ZONES_PATH"

PRICING_CONFIG_FILENAME = "pricing.yml"
SHIPPING_ZONES_FILENAME = "shipping_zones.yml"
CONFIG_FILENAMES = (PRICING_CONFIG_FILENAME, SHIPPING_ZONES_FILENAME)


class ConfigSource(str, Enum):
    """Where a configuration file was found."""

    EXPLICIT = "explicit"
    ENVIRONMENT = "environment"
    USER = "user"
    BUNDLED = "bundled"


@dataclass(frozen=True)
class ConfigLocation:
    path: str
    source: ConfigSource


def get_package_config_dir() -> Path:
    """Directory holding the bundled default files."""
    return Path(__file__).parent / "config"


def get_user_config_dir() -> Path:
    """Per-user config directory for this application."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def ensure_user_config_dir_exists() -> Path:
    """Create the user config directory if needed and check it is writable.

    Returns:
        The user config directory

    Raises:
        PermissionError: If the directory is not writable
        OSError: If the directory cannot be created
    """
    user_dir = get_user_config_dir()
    user_dir.mkdir(parents=True, exist_ok=True)
    if not os.access(user_dir, os.W_OK):
        raise PermissionError(f"Config directory is not writable: {user_dir}")
    return user_dir


def copy_default_to_user_config(filename: str) -> bool:
    """Seed the user config directory with one bundled file.

    Existing user files are never overwritten.

    Args:
        filename: Bundled file name, e.g. ``"pricing.yml"``

    Returns:
        True if the file was copied, False if nothing was done

    Raises:
        OSError: If the directory or the copy cannot be written
    """
    bundled = get_package_config_dir() / filename
    target = get_user_config_dir() / filename
    if target.exists() or not bundled.is_file():
        return False

    try:
        ensure_user_config_dir_exists()
        shutil.copyfile(bundled, target)
    except OSError as e:
        log_error(LogEvent.CONFIG, f"Failed to copy {filename} to {target}: {e}", error=str(e))
        raise

    log_info(LogEvent.CONFIG, f"Copied default {filename} to {target}", path=str(target))
    return True


def seed_user_config() -> List[str]:
    """Copy every bundled file missing from the user config directory.

    Returns:
        Names of the files that were copied
    """
    return [name for name in CONFIG_FILENAMES if copy_default_to_user_config(name)]


def locate_config(env_var: str, filename: str, explicit: Optional[str] = None) -> ConfigLocation:
    """Find a configuration file.

    An explicit path is returned as-is, even if it does not exist, so that the
    loader can report it. An environment variable pointing to a missing file
    is ignored.
    """
    if explicit:
        return ConfigLocation(explicit, ConfigSource.EXPLICIT)

    env_path = os.environ.get(env_var)
    if env_path and Path(env_path).is_file():
        return ConfigLocation(env_path, ConfigSource.ENVIRONMENT)

    user_path = get_user_config_dir() / filename
    if user_path.is_file():
        return ConfigLocation(str(user_path), ConfigSource.USER)

    return ConfigLocation(str(get_package_config_dir() / filename), ConfigSource.BUNDLED)


def get_pricing_config_path() -> str:
    """Path of the pricing rules file."""
    return locate_config(ENV_PRICING_CONFIG, PRICING_CONFIG_FILENAME).path


def get_shipping_zones_path() -> str:
    """Path of the shipping zones file."""
    return locate_config(ENV_SHIPPING_ZONES, SHIPPING_ZONES_FILENAME).path
