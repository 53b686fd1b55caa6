"""Default values applied underneath caller-supplied configuration."""

from __future__ import annotations

import platform

from .freeze import deep_freeze
from .transport import KeepAliveTransport

SDK_VERSION = "0.1.0"


def user_agent() -> str:
    return f"Box Python SDK v{SDK_VERSION} (Python {platform.python_version()})"


DEFAULTS = deep_freeze(
    {
        "client_id": None,
        "client_secret": None,
        "api_root_url": "https://api.box.com",
        "upload_api_root_url": "https://upload.box.com/api",
        "authorize_root_url": "https://account.box.com/api",
        "api_version": "2.0",
        "upload_request_timeout_ms": 60000,
        "retry_interval_ms": 2000,
        "num_max_retries": 5,
        "retry_strategy": None,
        "expired_buffer_ms": 180000,
        "app_auth": None,
        "iterators": False,
        "enterprise_id": None,
        "analytics_client": None,
        "proxy": {
            "url": None,
            "username": None,
            "password": None,
        },
        "request": {
            # API certificates must validate unless the caller opts out
            "strict_ssl": True,
            # Reuse connections to avoid a TLS handshake per request
            "agent_class": KeepAliveTransport,
            "agent_options": {"keep_alive": True},
            "json": True,
            # Responses may be file contents, so keep them as bytes
            "encoding": None,
            "follow_redirects": False,
            "headers": {"User-Agent": user_agent()},
        },
    }
)

APP_AUTH_DEFAULTS = deep_freeze(
    {
        "algorithm": "RS256",
        "expiration_time": 30,
        "verify_timestamp": False,
    }
)

__all__ = ["APP_AUTH_DEFAULTS", "DEFAULTS", "SDK_VERSION", "user_agent"]
