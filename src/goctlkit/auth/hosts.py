"""Hostname normalization and classification."""

from __future__ import annotations

GITHUB = "github.com"
LOCALHOST = "github.localhost"


def normalize_hostname(host: str) -> str:
    """Fold subdomains of the default and local hosts onto their canonical names."""
    hostname = host.lower()
    if hostname == GITHUB or hostname.endswith("." + GITHUB):
        return GITHUB
    if hostname == LOCALHOST or hostname.endswith("." + LOCALHOST):
        return LOCALHOST
    return hostname


def is_enterprise(host: str) -> bool:
    hostname = normalize_hostname(host)
    return hostname != GITHUB and hostname != LOCALHOST
