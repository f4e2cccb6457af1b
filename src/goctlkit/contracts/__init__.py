"""Public contracts for goctlkit."""

from goctlkit.contracts.exceptions import (
    AuthenticationError,
    BrowserError,
    ConfigError,
    GoctlKitError,
    HelperError,
)
from goctlkit.contracts.resolution import HostResult, TokenResult
from goctlkit.contracts.sources import Source

__all__ = [
    "AuthenticationError",
    "BrowserError",
    "ConfigError",
    "GoctlKitError",
    "HelperError",
    "HostResult",
    "Source",
    "TokenResult",
]
