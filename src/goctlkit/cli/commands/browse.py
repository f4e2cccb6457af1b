"""Browse command handler."""

from __future__ import annotations

import argparse

from goctlkit.browser import create_browser


def run_browse(args: argparse.Namespace) -> int:
    create_browser().browse(args.url)
    return 0
