"""Validation rules for caller-supplied configuration options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, InstanceOf, ValidationError, conint, constr

from .defaults import APP_AUTH_DEFAULTS
from .errors import InvalidConfiguration

VALID_ALGORITHMS = ("RS256", "RS384", "RS512")

APP_AUTH_MESSAGES = {
    "key_id": "Key ID must be provided in app auth params",
    "private_key": "Private key must be provided in app auth params",
    "passphrase": "Passphrase must be provided in app auth params",
    "algorithm": f"Algorithm in app auth params must be one of: {', '.join(VALID_ALGORITHMS)}",
    "expiration_time": "Valid token expiration time (1 - 60) must be provided in app auth params",
}

NonEmptyStr = constr(strict=True, min_length=1)
ExpirationSeconds = conint(strict=True, ge=1, le=60)
RawBinary = Union[bytes, InstanceOf[bytearray], InstanceOf[memoryview]]


class AppAuthOptions(BaseModel):
    """Rules for the explicitly supplied app auth fields.

    Optional fields are checked only when their key is present; an explicit
    ``None`` is rejected. Absent keys are filled from the app auth defaults
    after validation.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    key_id: str
    private_key: Union[str, RawBinary]
    passphrase: NonEmptyStr
    algorithm: Literal["RS256", "RS384", "RS512"] = APP_AUTH_DEFAULTS["algorithm"]
    expiration_time: ExpirationSeconds = APP_AUTH_DEFAULTS["expiration_time"]
    verify_timestamp: Any = None


def validate_required(options: Mapping[str, Any]) -> None:
    if not isinstance(options.get("client_id"), str):
        raise InvalidConfiguration('"client_id" must be set before using the SDK.')
    if not isinstance(options.get("client_secret"), str):
        raise InvalidConfiguration('"client_secret" must be set before using the SDK.')


def validate_app_auth(app_auth: Mapping[str, Any]) -> None:
    """Raise ``InvalidConfiguration`` when app auth values break the rules."""
    if not isinstance(app_auth, Mapping):
        raise InvalidConfiguration("App auth params must be a mapping")
    try:
        AppAuthOptions.model_validate(dict(app_auth))
    except ValidationError as exc:
        fields = []
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            if field not in fields:
                fields.append(field)
        message = "; ".join(APP_AUTH_MESSAGES.get(field, f"Invalid app auth field {field!r}") for field in fields)
        raise InvalidConfiguration(message) from exc


__all__ = ["AppAuthOptions", "VALID_ALGORITHMS", "validate_app_auth", "validate_required"]
