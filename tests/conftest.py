"""Shared test fixtures for goctlkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

RECOGNIZED_ENV_VARS = (
    "BROWSER",
    "CODESPACES",
    "GITHUB_ENTERPRISE_TOKEN",
    "GITHUB_TOKEN",
    "GOCTL_BROWSER",
    "GOCTL_CONFIG_DIR",
    "GOCTL_ENTERPRISE_TOKEN",
    "GOCTL_HOST",
    "GOCTL_PATH",
    "GOCTL_TOKEN",
    "XDG_CONFIG_HOME",
)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """An empty goctl config directory."""
    directory = tmp_path / "config"
    directory.mkdir()
    return directory


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, config_dir: Path) -> Path:
    """Clear goctl variables, point config at ``config_dir`` and hide any real helper."""
    for name in RECOGNIZED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GOCTL_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("GOCTL_PATH", str(tmp_path / "missing-goctl"))
    return config_dir
