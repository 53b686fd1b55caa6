"""Box Python SDK configuration."""

from .config import Config
from .defaults import APP_AUTH_DEFAULTS, DEFAULTS, SDK_VERSION
from .env import options_from_env
from .errors import InvalidConfiguration
from .freeze import deep_freeze
from .merge import merge
from .transport import KeepAliveTransport, ProxyTransport, create_client, create_transport
from .validation import validate_app_auth, validate_required

__version__ = SDK_VERSION

__all__ = [
    "APP_AUTH_DEFAULTS",
    "Config",
    "DEFAULTS",
    "InvalidConfiguration",
    "KeepAliveTransport",
    "ProxyTransport",
    "create_client",
    "create_transport",
    "deep_freeze",
    "merge",
    "options_from_env",
    "validate_app_auth",
    "validate_required",
]
