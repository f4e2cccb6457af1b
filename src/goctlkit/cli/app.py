"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import logging
import sys

from goctlkit.cli.commands.auth import run_auth_hosts, run_auth_status, run_auth_token
from goctlkit.cli.commands.browse import run_browse
from goctlkit.cli.parser import build_parser
from goctlkit.contracts.exceptions import AuthenticationError, BrowserError, ConfigError

_AUTH_COMMANDS = {
    "token": run_auth_token,
    "status": run_auth_status,
    "hosts": run_auth_hosts,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "auth":
            return _AUTH_COMMANDS[args.auth_command](args)
        if args.command == "browse":
            return run_browse(args)
        print(f"error: unsupported command: {args.command}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except AuthenticationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except BrowserError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
