"""Command-line interface for goctlkit."""

from __future__ import annotations

from goctlkit.cli.app import main as main
from goctlkit.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
