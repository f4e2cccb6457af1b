"""Browser launcher resolution and URL opening."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import sys
import webbrowser
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TextIO

from goctlkit.config.loader import Config, read_config
from goctlkit.contracts.exceptions import BrowserError

logger = logging.getLogger(__name__)

GOCTL_BROWSER = "GOCTL_BROWSER"
BROWSER = "BROWSER"
BROWSER_KEY = "browser"


def resolve_launcher(env: Mapping[str, str] | None, config: Config | None) -> str:
    """Pick the launcher command: ``GOCTL_BROWSER``, config ``browser``, then ``BROWSER``.

    An empty result means the platform default should be used.
    """
    env = os.environ if env is None else env
    launcher = env.get(GOCTL_BROWSER, "")
    if launcher:
        return launcher
    if config is not None:
        launcher = config.get([BROWSER_KEY]) or ""
        if launcher:
            return launcher
    return env.get(BROWSER, "")


@dataclass
class Browser:
    """Opens URLs with a launcher command, or the platform default when empty."""

    launcher: str = ""
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    def browse(self, url: str, env: Mapping[str, str] | None = None) -> None:
        """Open ``url``; ``env`` adds variables to the launcher's environment."""
        if not self.launcher:
            logger.debug("Opening %s with the platform default browser", url)
            if not webbrowser.open(url):
                raise BrowserError(f"no browser available to open {url}")
            return

        try:
            args = shlex.split(self.launcher)
        except ValueError as exc:
            raise BrowserError(f"invalid browser launcher: {self.launcher!r}") from exc
        if not args:
            raise BrowserError(f"invalid browser launcher: {self.launcher!r}")
        executable = shutil.which(args[0])
        if executable is None:
            raise BrowserError(f"browser launcher not found: {args[0]}")

        run_env = None
        if env:
            run_env = {**os.environ, **env}

        cmd = [executable, *args[1:], url]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, errors="replace", env=run_env, check=False)
        except OSError as exc:
            raise BrowserError(f"failed to run browser launcher {args[0]}: {exc}") from exc

        if result.stdout:
            self.stdout.write(result.stdout)
        if result.stderr:
            self.stderr.write(result.stderr)
        if result.returncode != 0:
            raise BrowserError(f"browser launcher {args[0]} exited with status {result.returncode}")


def create_browser(
    launcher: str = "",
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    env: Mapping[str, str] | None = None,
) -> Browser:
    """Build a :class:`Browser`, resolving the launcher when none is given."""
    env = os.environ if env is None else env
    if not launcher:
        launcher = resolve_launcher(env, read_config(env))
    return Browser(
        launcher=launcher,
        stdout=stdout if stdout is not None else sys.stdout,
        stderr=stderr if stderr is not None else sys.stderr,
    )
