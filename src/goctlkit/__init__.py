"""Public API surface for goctlkit."""

__version__ = "0.1.0"

from goctlkit.auth import (
    GITHUB,
    LOCALHOST,
    GoctlHelper,
    HelperInvoker,
    default_host,
    find_helper,
    is_enterprise,
    known_hosts,
    normalize_hostname,
    read_default_host,
    read_known_hosts,
    resolve_token,
    token_for_host,
    token_from_env_or_config,
)
from goctlkit.browser import Browser, create_browser, resolve_launcher
from goctlkit.config import Config, load_config, read_config
from goctlkit.contracts import (
    AuthenticationError,
    BrowserError,
    ConfigError,
    GoctlKitError,
    HelperError,
    HostResult,
    Source,
    TokenResult,
)

__all__ = [
    "GITHUB",
    "LOCALHOST",
    "AuthenticationError",
    "Browser",
    "BrowserError",
    "Config",
    "ConfigError",
    "GoctlHelper",
    "GoctlKitError",
    "HelperError",
    "HelperInvoker",
    "HostResult",
    "Source",
    "TokenResult",
    "__version__",
    "create_browser",
    "default_host",
    "find_helper",
    "is_enterprise",
    "known_hosts",
    "load_config",
    "normalize_hostname",
    "read_config",
    "read_default_host",
    "read_known_hosts",
    "resolve_launcher",
    "resolve_token",
    "token_for_host",
    "token_from_env_or_config",
]
