"""In-memory credential helper fake."""

from __future__ import annotations

from dataclasses import dataclass, field

from goctlkit.auth.helper import HelperInvoker
from goctlkit.contracts.exceptions import HelperError


@dataclass
class FakeHelper(HelperInvoker):
    tokens: dict[str, str] = field(default_factory=dict)
    fail: bool = False
    calls: list[str] = field(default_factory=list)

    def invoke(self, host: str) -> str:
        self.calls.append(host)
        if self.fail:
            raise HelperError(f"helper failed for {host}", returncode=1)
        return self.tokens.get(host, "")
