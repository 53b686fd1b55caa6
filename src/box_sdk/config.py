"""Configuration object for the Box Python SDK."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import FrozenInstanceError
from typing import Any, Dict, Optional

from .defaults import APP_AUTH_DEFAULTS, DEFAULTS
from .env import options_from_env
from .errors import InvalidConfiguration
from .freeze import deep_freeze, thaw
from .merge import merge
from .proxy import apply_proxy_agent
from .validation import validate_app_auth, validate_required

logger = logging.getLogger(__name__)

# Names of Config's own members that option keys may not shadow.
RESERVED_KEYS = frozenset({"extend", "to_dict", "from_env", "_params"})

REDACTED = "[REDACTED]"
SECRET_APP_AUTH_KEYS = ("private_key", "passphrase")


class Config:
    """Immutable, fully resolved SDK configuration.

    Caller options are validated, merged over ``DEFAULTS`` and frozen on
    construction. Every known option is exposed as an attribute; unknown
    options pass through and are readable as attributes too. Nested tables
    are read-only mappings. Use ``extend`` to derive a modified copy.
    """

    __slots__ = (
        "client_id",
        "client_secret",
        "api_root_url",
        "upload_api_root_url",
        "authorize_root_url",
        "api_version",
        "upload_request_timeout_ms",
        "retry_interval_ms",
        "num_max_retries",
        "retry_strategy",
        "expired_buffer_ms",
        "app_auth",
        "iterators",
        "enterprise_id",
        "analytics_client",
        "proxy",
        "request",
        "_params",
    )

    client_id: str
    client_secret: str
    api_root_url: str
    upload_api_root_url: str
    authorize_root_url: str
    api_version: str
    upload_request_timeout_ms: int
    retry_interval_ms: int
    num_max_retries: int
    retry_strategy: Any
    expired_buffer_ms: int
    app_auth: Optional[Mapping[str, Any]]
    iterators: bool
    enterprise_id: Optional[str]
    analytics_client: Any
    proxy: Mapping[str, Any]
    request: Mapping[str, Any]
    _params: Mapping[str, Any]

    def __init__(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        params: Dict[str, Any] = dict(options or {})
        params.update(kwargs)

        validate_required(params)
        if params.get("app_auth") is not None:
            validate_app_auth(params["app_auth"])
            params["app_auth"] = merge(APP_AUTH_DEFAULTS, params["app_auth"])

        reserved = sorted(RESERVED_KEYS.intersection(params))
        if reserved:
            raise InvalidConfiguration(f"Config params may not override Config methods: {', '.join(reserved)}")

        resolved = merge(DEFAULTS, params)
        apply_proxy_agent(resolved)
        frozen = deep_freeze(resolved)

        object.__setattr__(self, "_params", frozen)
        for name in self.__slots__[:-1]:
            object.__setattr__(self, name, frozen[name])

        logger.debug(
            "Resolved configuration api_root_url=%s app_auth=%s proxy=%s extra_keys=%s",
            self.api_root_url,
            self.app_auth is not None,
            bool(self.proxy["url"]),
            sorted(set(frozen) - set(DEFAULTS)),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "Config":
        """Build a config from ``BOX_*`` environment variables plus overrides."""
        return cls(merge(options_from_env(environ), overrides))

    def extend(self, overrides: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Config":
        """Return a new config with ``overrides`` layered over this one.

        The result is validated and frozen from scratch; this config is left
        untouched.
        """
        params = merge(self._params, overrides, kwargs)
        for key in RESERVED_KEYS:
            params.pop(key, None)
        return type(self)(params)

    def to_dict(self) -> Dict[str, Any]:
        """Return a mutable deep copy of every resolved option."""
        return thaw(self._params)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names outside __slots__, i.e. pass-through options.
        try:
            params = object.__getattribute__(self, "_params")
        except AttributeError:
            raise AttributeError(name) from None
        try:
            return params[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field {name!r}")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {name!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self._params == other._params

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        shown = dict(self._params)
        shown["client_secret"] = REDACTED
        if isinstance(shown.get("app_auth"), Mapping):
            app_auth = dict(shown["app_auth"])
            for key in SECRET_APP_AUTH_KEYS:
                if key in app_auth:
                    app_auth[key] = REDACTED
            shown["app_auth"] = app_auth
        if shown["proxy"].get("password"):
            shown["proxy"] = {**shown["proxy"], "password": REDACTED}
        agent_options = shown["request"].get("agent_options")
        if isinstance(agent_options, Mapping) and "auth" in agent_options:
            shown["request"] = {**shown["request"], "agent_options": {**agent_options, "auth": REDACTED}}
        fields = ", ".join(f"{key}={value!r}" for key, value in shown.items())
        return f"{type(self).__name__}({fields})"


__all__ = ["Config", "RESERVED_KEYS"]
