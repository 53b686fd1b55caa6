"""Recursive immutability for resolved configuration values."""

from __future__ import annotations

import io
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

# Request bodies that must stay consumable after being embedded in config.
PAYLOAD_TYPES = (bytearray, memoryview, io.IOBase, Iterator)


def is_payload(value: Any) -> bool:
    """Return True for binary buffers and streams that freezing must not touch."""
    return isinstance(value, PAYLOAD_TYPES)


def deep_freeze(value: Any) -> Any:
    """Return an immutable equivalent of ``value``.

    Mappings become read-only ``MappingProxyType`` views over fresh dicts,
    lists and tuples become tuples and sets become frozensets. Binary buffers
    and streaming payloads are returned as-is so their read position and
    contents remain usable. Freezing an already frozen value is a no-op.
    """
    if is_payload(value):
        return value
    if isinstance(value, Mapping):
        frozen = {key: deep_freeze(item) for key, item in value.items()}
        # A view whose children are all already frozen is reused as-is.
        if isinstance(value, MappingProxyType) and all(frozen[key] is value[key] for key in frozen):
            return value
        return MappingProxyType(frozen)
    if isinstance(value, list) or type(value) is tuple:
        items = tuple(deep_freeze(item) for item in value)
        if type(value) is tuple and all(new is old for new, old in zip(items, value)):
            return value
        return items
    if isinstance(value, (set, frozenset)):
        return frozenset(deep_freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return a mutable deep copy of a frozen value."""
    if is_payload(value):
        return value
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if type(value) is tuple:
        return [thaw(item) for item in value]
    if isinstance(value, frozenset):
        return {thaw(item) for item in value}
    return value


__all__ = ["PAYLOAD_TYPES", "deep_freeze", "is_payload", "thaw"]
