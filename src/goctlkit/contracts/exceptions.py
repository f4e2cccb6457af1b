"""Exception hierarchy for goctlkit.

All goctlkit exceptions inherit from :class:`GoctlKitError`. The resolvers
absorb :class:`ConfigError` and :class:`HelperError` and degrade to an empty
result; only the CLI layer surfaces errors to the user.
"""

from __future__ import annotations


class GoctlKitError(Exception):
    """Base exception for all goctlkit errors."""


class ConfigError(GoctlKitError):
    """Configuration loading or parsing failure."""


class HelperError(GoctlKitError):
    """The external credential helper could not be run or exited non-zero."""

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class AuthenticationError(GoctlKitError):
    """No usable token is available for a host."""


class BrowserError(GoctlKitError):
    """The browser launcher is missing or failed."""
