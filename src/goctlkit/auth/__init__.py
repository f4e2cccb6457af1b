"""Token and host resolution exports."""

from goctlkit.auth.helper import GoctlHelper, HelperInvoker, find_helper
from goctlkit.auth.hosts import GITHUB, LOCALHOST, is_enterprise, normalize_hostname
from goctlkit.auth.known_hosts import default_host, known_hosts, read_default_host, read_known_hosts
from goctlkit.auth.tokens import resolve_token, token_for_host, token_from_env_or_config

__all__ = [
    "GITHUB",
    "LOCALHOST",
    "GoctlHelper",
    "HelperInvoker",
    "default_host",
    "find_helper",
    "is_enterprise",
    "known_hosts",
    "normalize_hostname",
    "read_default_host",
    "read_known_hosts",
    "resolve_token",
    "token_for_host",
    "token_from_env_or_config",
]
