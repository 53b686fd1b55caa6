"""Derive the proxy transport agent from merged configuration params."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict
from urllib.parse import urlsplit

from .errors import InvalidConfiguration
from .transport import ProxyTransport

logger = logging.getLogger(__name__)


def parse_proxy_url(url: str) -> Dict[str, Any]:
    """Split a proxy URL into the components ``ProxyTransport`` accepts."""
    if not isinstance(url, str):
        raise InvalidConfiguration(f"Proxy URL must be a string, got {type(url).__name__}")
    parts = urlsplit(url)
    try:
        port = parts.port
    except ValueError as exc:
        raise InvalidConfiguration(f"Proxy URL has an invalid port: {url!r}") from exc
    if not parts.scheme or not parts.hostname:
        raise InvalidConfiguration(f"Proxy URL must include a scheme and host: {url!r}")

    hostname = f"[{parts.hostname}]" if ":" in parts.hostname else parts.hostname
    components: Dict[str, Any] = {
        "protocol": parts.scheme,
        "host": f"{hostname}:{port}" if port is not None else hostname,
        "hostname": parts.hostname,
        "port": port,
        "path": parts.path or "/",
        "href": url,
    }
    if parts.username is not None:
        components["auth"] = f"{parts.username}:{parts.password or ''}"
    return components


def apply_proxy_agent(params: Dict[str, Any]) -> None:
    """Swap in a proxy-capable transport agent when a proxy URL is configured.

    Operates in place on merged params that have not been frozen yet.
    """
    proxy = params.get("proxy")
    request = params.get("request")
    if not isinstance(proxy, Mapping) or not isinstance(request, Mapping):
        raise InvalidConfiguration('"proxy" and "request" options must be mappings')

    url = proxy.get("url")
    if not url:
        return

    agent_options = dict(request.get("agent_options") or {})
    agent_options.update(parse_proxy_url(url))

    username = proxy.get("username")
    password = proxy.get("password")
    if username and password:
        agent_options["auth"] = f"{username}:{password}"
    elif username or password:
        logger.debug("Ignoring proxy credentials; both username and password are required")

    request["agent_class"] = ProxyTransport
    request["agent_options"] = agent_options
    logger.debug("Routing requests through proxy host=%s", agent_options["host"])


__all__ = ["apply_proxy_agent", "parse_proxy_url"]
