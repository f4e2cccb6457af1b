"""Discovery of authenticated hosts."""

from __future__ import annotations

import os
from collections.abc import Mapping

from goctlkit.auth.hosts import GITHUB
from goctlkit.auth.tokens import resolve_token
from goctlkit.config.loader import HOSTS_KEY, Config, read_config
from goctlkit.contracts.resolution import HostResult
from goctlkit.contracts.sources import Source

GOCTL_HOST = "GOCTL_HOST"


def known_hosts(config: Config | None, env: Mapping[str, str] | None = None) -> set[str]:
    """Return hosts with a discoverable token, or an empty set."""
    env = os.environ if env is None else env
    hosts: set[str] = set()
    env_host = env.get(GOCTL_HOST, "")
    if env_host:
        hosts.add(env_host)
    if resolve_token(GITHUB, config, env).token:
        hosts.add(GITHUB)
    if config is not None:
        hosts.update(config.keys([HOSTS_KEY]) or [])
    return hosts


def default_host(config: Config | None, env: Mapping[str, str] | None = None) -> HostResult:
    """Return the host to use when none is given, and where it came from.

    Several configured hosts are as ambiguous as none and yield ``github.com``.
    """
    env = os.environ if env is None else env
    env_host = env.get(GOCTL_HOST, "")
    if env_host:
        return HostResult(host=env_host, source=Source.GOCTL_HOST)
    if config is not None:
        keys = config.keys([HOSTS_KEY])
        if keys is not None and len(keys) == 1:
            return HostResult(host=keys[0], source=Source.HOSTS)
    return HostResult(host=GITHUB, source=Source.DEFAULT)


def read_known_hosts(env: Mapping[str, str] | None = None) -> set[str]:
    env = os.environ if env is None else env
    return known_hosts(read_config(env), env)


def read_default_host(env: Mapping[str, str] | None = None) -> HostResult:
    env = os.environ if env is None else env
    return default_host(read_config(env), env)
