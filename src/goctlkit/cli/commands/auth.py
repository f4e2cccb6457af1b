"""Auth command handlers."""

from __future__ import annotations

import argparse
import os

from rich.console import Console
from rich.table import Table

from goctlkit.auth import default_host, known_hosts, read_default_host, token_for_host
from goctlkit.cli.common import mask_token
from goctlkit.config import read_config
from goctlkit.contracts.exceptions import AuthenticationError


def run_auth_token(args: argparse.Namespace) -> int:
    host = args.hostname or read_default_host().host
    result = token_for_host(host)
    if not result.token:
        raise AuthenticationError(f"no token found for {host}")
    print(result.token)
    return 0


def run_auth_hosts(args: argparse.Namespace) -> int:
    del args
    env = os.environ
    for host in sorted(known_hosts(read_config(env), env)):
        print(host)
    return 0


def run_auth_status(args: argparse.Namespace, *, console: Console | None = None) -> int:
    del args
    env = os.environ
    config = read_config(env)
    hosts = known_hosts(config, env)
    if not hosts:
        raise AuthenticationError("not logged in to any hosts")

    default = default_host(config, env)
    table = Table(title="Authentication status")
    table.add_column("Host")
    table.add_column("Token")
    table.add_column("Source")
    table.add_column("Default")
    for host in sorted(hosts):
        result = token_for_host(host, env=env)
        marker = f"yes ({default.source})" if host == default.host else ""
        table.add_row(host, mask_token(result.token), str(result.source), marker)

    (console or Console()).print(table)
    return 0
