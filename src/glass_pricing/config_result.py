"""Outcome of reading one YAML configuration file."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config_paths import ConfigSource


@dataclass
class ConfigResult:
    """What came out of reading a configuration file.

    ``data`` is set on success. On failure ``error`` holds a readable message
    and ``exception`` the underlying error, if any; a ``FileNotFoundError``
    there means the file was missing rather than malformed.
    """

    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    exception: Optional[Exception] = None
    path: Optional[str] = None
    source: Optional[ConfigSource] = None

    @property
    def missing(self) -> bool:
        return isinstance(self.exception, FileNotFoundError)
