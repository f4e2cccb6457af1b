"""Provenance tags for resolved values."""

from __future__ import annotations

from enum import StrEnum


class Source(StrEnum):
    """Where a resolved token or host came from.

    Values are the environment variable names, configuration keys and helper
    name that produced the value, so they can be shown to users verbatim.
    """

    GOCTL_ENTERPRISE_TOKEN = "GOCTL_ENTERPRISE_TOKEN"
    GITHUB_ENTERPRISE_TOKEN = "GITHUB_ENTERPRISE_TOKEN"
    GOCTL_TOKEN = "GOCTL_TOKEN"
    GITHUB_TOKEN = "GITHUB_TOKEN"
    OAUTH_TOKEN = "oauth_token"
    GOCTL = "goctl"
    GOCTL_HOST = "GOCTL_HOST"
    HOSTS = "hosts"
    DEFAULT = "default"
