"""Deep merge used to layer caller options over the default tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional

from .freeze import is_payload


def _clone(value: Any) -> Any:
    if is_payload(value):
        return value
    if isinstance(value, Mapping):
        return {key: _clone(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_clone(item) for item in value]
    return value


def _merge_into(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        if value is None and key in target:
            continue
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            _merge_into(current, value)
        else:
            target[key] = _clone(value)


def merge(*sources: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Merge mappings into a new dict, rightmost source winning.

    Nested mappings are merged key by key. A ``None`` value is treated as
    unset and never overrides an earlier value for the same key. Sources are
    not modified.
    """
    result: Dict[str, Any] = {}
    for source in sources:
        if source:
            _merge_into(result, source)
    return result


__all__ = ["merge"]
