"""Configuration directory discovery."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

GOCTL_CONFIG_DIR = "GOCTL_CONFIG_DIR"
XDG_CONFIG_HOME = "XDG_CONFIG_HOME"


def config_dir_from_env(env: Mapping[str, str] | None = None) -> Path:
    env = os.environ if env is None else env
    explicit = env.get(GOCTL_CONFIG_DIR, "")
    if explicit:
        return Path(explicit).expanduser()
    xdg = env.get(XDG_CONFIG_HOME, "")
    if xdg:
        return Path(xdg).expanduser() / "goctl"
    return Path.home() / ".config" / "goctl"
