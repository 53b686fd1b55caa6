"""Read configuration options from environment variables."""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .errors import InvalidConfiguration

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_int(var: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidConfiguration(f"{var} must be an integer, got {value!r}") from exc


def _parse_bool(var: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise InvalidConfiguration(f"{var} must be a boolean, got {value!r}")


def _parse_str(var: str, value: str) -> str:
    return value


# option path -> (environment variable, parser)
ENV_OPTIONS: Dict[Tuple[str, ...], Tuple[str, Callable[[str, str], Any]]] = {
    ("client_id",): ("BOX_CLIENT_ID", _parse_str),
    ("client_secret",): ("BOX_CLIENT_SECRET", _parse_str),
    ("api_root_url",): ("BOX_API_ROOT_URL", _parse_str),
    ("upload_api_root_url",): ("BOX_UPLOAD_API_ROOT_URL", _parse_str),
    ("authorize_root_url",): ("BOX_AUTHORIZE_ROOT_URL", _parse_str),
    ("upload_request_timeout_ms",): ("BOX_UPLOAD_REQUEST_TIMEOUT_MS", _parse_int),
    ("retry_interval_ms",): ("BOX_RETRY_INTERVAL_MS", _parse_int),
    ("num_max_retries",): ("BOX_NUM_MAX_RETRIES", _parse_int),
    ("expired_buffer_ms",): ("BOX_EXPIRED_BUFFER_MS", _parse_int),
    ("enterprise_id",): ("BOX_ENTERPRISE_ID", _parse_str),
    ("proxy", "url"): ("BOX_PROXY_URL", _parse_str),
    ("proxy", "username"): ("BOX_PROXY_USERNAME", _parse_str),
    ("proxy", "password"): ("BOX_PROXY_PASSWORD", _parse_str),
    ("request", "strict_ssl"): ("BOX_STRICT_SSL", _parse_bool),
}


def options_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Build a configuration options dict from ``BOX_*`` environment variables.

    Unset and empty variables are skipped so the defaults apply.
    """
    env = os.environ if environ is None else environ
    options: Dict[str, Any] = {}
    for path, (var, parse) in ENV_OPTIONS.items():
        raw = env.get(var)
        if not raw:
            continue
        target = options
        for key in path[:-1]:
            target = target.setdefault(key, {})
        target[path[-1]] = parse(var, raw)
    return options


__all__ = ["ENV_OPTIONS", "options_from_env"]
