"""httpx transports built from a resolved configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import httpx

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import Config

logger = logging.getLogger(__name__)


class KeepAliveTransport(httpx.HTTPTransport):
    """HTTP transport that keeps connections alive between requests."""

    def __init__(
        self,
        *,
        keep_alive: bool = True,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
        keepalive_expiry: float = 5.0,
        **kwargs: Any,
    ) -> None:
        if "limits" not in kwargs:
            kwargs["limits"] = httpx.Limits(
                max_connections=max_connections,
                max_keepalive_connections=max_keepalive_connections if keep_alive else 0,
                keepalive_expiry=keepalive_expiry if keep_alive else 0,
            )
        super().__init__(**kwargs)


class ProxyTransport(KeepAliveTransport):
    """Keep-alive transport that routes every request through a proxy.

    Accepts the components produced by ``parse_proxy_url`` plus an optional
    ``auth`` string of the form ``"username:password"``.
    """

    def __init__(
        self,
        *,
        protocol: str = "http",
        host: Optional[str] = None,
        hostname: Optional[str] = None,
        port: Optional[int] = None,
        path: Optional[str] = None,
        href: Optional[str] = None,
        auth: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        netloc = host or hostname
        if not netloc:
            raise ValueError("ProxyTransport requires a proxy host")
        credentials = None
        if auth:
            username, _, password = auth.partition(":")
            credentials = (username, password)
        self.proxy_url = f"{protocol}://{netloc}"
        super().__init__(proxy=httpx.Proxy(self.proxy_url, auth=credentials), **kwargs)


def create_transport(config: "Config") -> httpx.BaseTransport:
    """Instantiate the transport agent named by ``config.request``."""
    request = config.request
    options = dict(request["agent_options"])
    options.setdefault("verify", request["strict_ssl"])
    agent_class = request["agent_class"]
    logger.debug("Creating transport agent=%s strict_ssl=%s", getattr(agent_class, "__name__", agent_class), request["strict_ssl"])
    return agent_class(**options)


def create_client(config: "Config", *, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """Return an ``httpx.Client`` wired to the configured API root and headers."""
    request = config.request
    return httpx.Client(
        base_url=config.api_root_url,
        headers=dict(request["headers"]),
        follow_redirects=request["follow_redirects"],
        transport=transport or create_transport(config),
    )


__all__ = ["KeepAliveTransport", "ProxyTransport", "create_client", "create_transport"]
