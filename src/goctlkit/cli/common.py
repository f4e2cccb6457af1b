"""Shared CLI formatting helpers."""

from __future__ import annotations


def mask_token(token: str) -> str:
    if not token:
        return "none"
    visible = token[:4] if len(token) > 8 else ""
    return f"{visible}{'*' * 8}"
