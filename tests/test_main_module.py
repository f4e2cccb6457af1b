"""Tests for running goctlkit as a module and as an installed script."""

from __future__ import annotations

import importlib
import os
import subprocess
import sys
import tomllib
from pathlib import Path

import pytest

import goctlkit.cli

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


def _run_module(module: str, *args: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH", "")]))
    return subprocess.run(
        [sys.executable, "-m", module, *args],
        capture_output=True,
        text=True,
        env=env,
        check=False,
    )


def test_python_m_goctlkit_lists_hosts(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (isolated_env / "hosts.json").write_text('{"ghe.io": {"oauth_token": "t"}}', encoding="utf-8")
    monkeypatch.setenv("GITHUB_TOKEN", "gho_env")

    result = _run_module("goctlkit", "auth", "hosts")

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == ["ghe.io", "github.com"]


def test_python_m_goctlkit_reports_missing_token(isolated_env: Path) -> None:
    result = _run_module("goctlkit", "auth", "token", "--hostname", "ghe.io")

    assert result.returncode == 4
    assert result.stdout == ""
    assert "no token found for ghe.io" in result.stderr


def test_python_m_goctlkit_cli_prints_version() -> None:
    result = _run_module("goctlkit.cli", "--version")

    assert result.returncode == 0
    assert result.stdout.startswith("goctlkit ")


def test_importing_main_module_does_not_dispatch(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[object] = []
    monkeypatch.setattr(goctlkit.cli, "main", lambda *args: calls.append(args) or 0)
    monkeypatch.delitem(sys.modules, "goctlkit.__main__", raising=False)

    importlib.import_module("goctlkit.__main__")

    assert calls == []


def test_script_entry_point_resolves_to_cli_main() -> None:
    pyproject_path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    scripts = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))["tool"]["poetry"]["scripts"]

    module_name, _, attr = scripts["goctlkit"].partition(":")

    assert getattr(importlib.import_module(module_name), attr) is goctlkit.cli.main
