"""External credential helper backed by secure storage."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from goctlkit.contracts.exceptions import HelperError

logger = logging.getLogger(__name__)

GOCTL_PATH = "GOCTL_PATH"
HELPER_NAME = "goctl"


class HelperInvoker(ABC):
    @abstractmethod
    def invoke(self, host: str) -> str:
        """Return the helper's token for ``host``, or an empty string."""


@dataclass(frozen=True)
class GoctlHelper(HelperInvoker):
    """Runs ``goctl auth token --secure-storage --hostname <host>``.

    The call blocks until the helper exits; no timeout is applied.
    """

    path: str

    def invoke(self, host: str) -> str:
        cmd = [self.path, "auth", "token", "--secure-storage", "--hostname", host]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as exc:
            raise HelperError(f"Failed to execute {self.path}: {exc}") from exc

        if result.returncode != 0:
            details = result.stderr.decode(errors="replace").strip()
            message = f"{HELPER_NAME} auth token failed for host {host}"
            if details:
                message = f"{message}: {details}"
            raise HelperError(message, returncode=result.returncode)

        return result.stdout.decode(errors="replace").strip()


def find_helper(
    env: Mapping[str, str] | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> str | None:
    """Locate the helper via ``GOCTL_PATH`` or a ``PATH`` search."""
    env = os.environ if env is None else env
    override = env.get(GOCTL_PATH, "")
    if override:
        return override
    return which(HELPER_NAME) or None
