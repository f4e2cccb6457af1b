"""Token resolution for a host.

Sources are tried in a fixed order and the first one that yields a token
wins. Enterprise hosts only consult the enterprise variables, the Codespaces
carve-out and the configuration; the default and local hosts consult the
general variables and the configuration. :func:`token_for_host` additionally
falls back to the ``goctl`` helper, which reads the system keyring.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from goctlkit.auth.helper import GoctlHelper, HelperInvoker, find_helper
from goctlkit.auth.hosts import is_enterprise, normalize_hostname
from goctlkit.config.loader import HOSTS_KEY, Config, read_config
from goctlkit.contracts.exceptions import HelperError
from goctlkit.contracts.resolution import TokenResult
from goctlkit.contracts.sources import Source

logger = logging.getLogger(__name__)

CODESPACES = "CODESPACES"
OAUTH_TOKEN_KEY = "oauth_token"

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})


def _is_codespaces(env: Mapping[str, str]) -> bool:
    return env.get(CODESPACES, "") in _TRUE_VALUES


def _config_token(config: Config, host: str) -> TokenResult:
    token = config.get([HOSTS_KEY, host, OAUTH_TOKEN_KEY]) or ""
    return TokenResult(token=token, source=Source.OAUTH_TOKEN)


def _env_token(env: Mapping[str, str], *sources: Source) -> TokenResult | None:
    for source in sources:
        token = env.get(source.value, "")
        if token:
            return TokenResult(token=token, source=source)
    return None


def resolve_token(host: str, config: Config | None, env: Mapping[str, str] | None = None) -> TokenResult:
    """Resolve a token for ``host`` from environment variables and configuration.

    Once a config is present its value is returned even when empty, tagged
    with the ``oauth_token`` source.
    """
    env = os.environ if env is None else env
    host = normalize_hostname(host)

    if is_enterprise(host):
        found = _env_token(env, Source.GOCTL_ENTERPRISE_TOKEN, Source.GITHUB_ENTERPRISE_TOKEN)
        if found is not None:
            return found
        if _is_codespaces(env):
            found = _env_token(env, Source.GITHUB_TOKEN)
            if found is not None:
                return found
        # NOTE: enterprise hosts never fall through to GOCTL_TOKEN/GITHUB_TOKEN.
        if config is not None:
            return _config_token(config, host)
        return TokenResult()

    found = _env_token(env, Source.GOCTL_TOKEN, Source.GITHUB_TOKEN)
    if found is not None:
        return found
    if config is not None:
        return _config_token(config, host)
    return TokenResult()


def token_from_env_or_config(host: str, *, env: Mapping[str, str] | None = None) -> TokenResult:
    """Resolve a token from environment variables or the config file only.

    Does not consult the system keyring. Most callers want :func:`token_for_host`.
    """
    env = os.environ if env is None else env
    return resolve_token(host, read_config(env), env)


def _helper_token(host: str, helper: HelperInvoker) -> str:
    try:
        return helper.invoke(host)
    except HelperError as exc:
        logger.debug("Credential helper gave no token for %s: %s", host, exc)
        return ""


def token_for_host(
    host: str,
    *,
    env: Mapping[str, str] | None = None,
    helper: HelperInvoker | None = None,
) -> TokenResult:
    """Resolve a token for ``host`` from env, config, then the ``goctl`` helper.

    Returns an empty token with the ``default`` source when nothing is found.
    """
    env = os.environ if env is None else env
    result = token_from_env_or_config(host, env=env)
    if result.token:
        return result

    if helper is None:
        helper_path = find_helper(env)
        if helper_path is None:
            logger.debug("No goctl helper found for %s", host)
            return TokenResult()
        helper = GoctlHelper(path=helper_path)

    token = _helper_token(host, helper)
    if token:
        return TokenResult(token=token, source=Source.GOCTL)
    return TokenResult()
