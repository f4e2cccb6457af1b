"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("goctlkit")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="goctlkit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    auth_parser = subparsers.add_parser("auth", help="Inspect resolved credentials")
    auth_subparsers = auth_parser.add_subparsers(dest="auth_command", required=True)

    token_parser = auth_subparsers.add_parser("token", help="Print the token for a host")
    token_parser.add_argument("--hostname", default=None, help="Host to resolve (default: the default host)")
    token_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    status_parser = auth_subparsers.add_parser("status", help="Show known hosts and where their tokens come from")
    status_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    hosts_parser = auth_subparsers.add_parser("hosts", help="List hosts with a discoverable token")
    hosts_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    browse_parser = subparsers.add_parser("browse", help="Open a URL with the configured browser")
    browse_parser.add_argument("url", help="URL to open")
    browse_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
