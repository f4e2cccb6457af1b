"""Resolution result contracts."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, model_validator

from goctlkit.contracts.sources import Source


class TokenResult(BaseModel):
    """A token paired with the source that supplied it.

    Unpacks like a tuple: ``token, source = result``.
    """

    token: str = ""
    source: Source = Source.DEFAULT

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_default_source(self) -> TokenResult:
        if self.token and self.source is Source.DEFAULT:
            raise ValueError("a non-empty token cannot carry the default source")
        return self

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        yield self.token
        yield self.source


class HostResult(BaseModel):
    host: str
    source: Source

    model_config = {"frozen": True}

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        yield self.host
        yield self.source
