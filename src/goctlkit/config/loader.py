"""Configuration reading.

The configuration directory holds ``config.json`` for general settings and
``hosts.json`` for per-host settings. Host settings are exposed under the
``hosts`` key, so ``hosts.json``::

    {"github.com": {"oauth_token": "gho_xxx"}}

is read as ``config.get(["hosts", "github.com", "oauth_token"])``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from goctlkit.config.paths import config_dir_from_env
from goctlkit.contracts.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"
HOSTS_FILE = "hosts.json"
HOSTS_KEY = "hosts"


@dataclass(frozen=True)
class Config:
    """Read-only view over nested configuration data."""

    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_string(cls, text: str) -> Config:
        return cls(data=_parse_document(text, origin="<string>"))

    def _node(self, path: Sequence[str]) -> Any:
        node: Any = self.data
        for key in path:
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]
        return node

    def get(self, path: Sequence[str]) -> str | None:
        """Return the scalar at ``path`` as a string, or None when absent."""
        node = self._node(path)
        if node is None or isinstance(node, (dict, list)):
            return None
        if isinstance(node, bool):
            return "true" if node else "false"
        return str(node)

    def keys(self, path: Sequence[str]) -> list[str] | None:
        """Return the keys of the mapping at ``path`` in file order, or None."""
        node = self._node(path)
        if not isinstance(node, dict):
            return None
        return list(node)


def _parse_document(text: str, *, origin: str) -> dict[str, Any]:
    try:
        payload: Any = json.loads(text) if text.strip() else {}
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {origin}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"config file must contain a JSON object: {origin}")
    return payload


def _read_document(path: Path) -> dict[str, Any] | None:
    if not path.exists():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"config file is not valid UTF-8: {path}") from exc
    return _parse_document(text, origin=str(path))


def load_config(config_dir: str | Path) -> Config | None:
    """Load configuration from ``config_dir``.

    Returns None when neither file exists.

    Raises:
        ConfigError: If a file cannot be read or is not a JSON object.
    """
    directory = Path(config_dir).expanduser()
    general = _read_document(directory / CONFIG_FILE)
    hosts = _read_document(directory / HOSTS_FILE)
    if general is None and hosts is None:
        return None

    data = dict(general or {})
    if hosts is not None:
        data[HOSTS_KEY] = hosts
    return Config(data=data)


def read_config(env: Mapping[str, str] | None = None) -> Config | None:
    """Load configuration from the directory named by ``env``.

    Unreadable or invalid configuration is treated as absent.
    """
    config_dir = config_dir_from_env(env)
    try:
        return load_config(config_dir)
    except ConfigError as exc:
        logger.debug("Ignoring configuration in %s: %s", config_dir, exc)
        return None
