from __future__ import annotations

import io
from types import MappingProxyType

import pytest

from box_sdk.freeze import deep_freeze, is_payload, thaw
from box_sdk.merge import merge


def test_nested_mappings_become_read_only() -> None:
    frozen = deep_freeze({"request": {"headers": {"User-Agent": "sdk"}}, "tags": ["a", "b"]})

    with pytest.raises(TypeError):
        frozen["request"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        frozen["request"]["headers"]["User-Agent"] = "other"  # type: ignore[index]

    assert frozen["request"]["headers"]["User-Agent"] == "sdk"
    assert frozen["tags"] == ("a", "b")


def test_sets_become_frozensets() -> None:
    assert deep_freeze({"scopes": {"read"}})["scopes"] == frozenset({"read"})


def test_freeze_is_idempotent() -> None:
    frozen = deep_freeze({"a": {"b": 1}})
    assert deep_freeze(frozen) is frozen
    assert deep_freeze(frozen["a"]) is frozen["a"]


def test_frozen_values_with_tuples_are_reused() -> None:
    frozen = deep_freeze({"tags": ["a", "b"], "nested": {"ids": [1, 2]}})
    assert deep_freeze(frozen) is frozen


def test_read_only_view_over_mutable_children_is_frozen() -> None:
    view = MappingProxyType({"a": {"b": 1}, "items": [1]})
    frozen = deep_freeze(view)

    with pytest.raises(TypeError):
        frozen["a"]["b"] = 2  # type: ignore[index]
    assert frozen["items"] == (1,)
    assert frozen == {"a": {"b": 1}, "items": (1,)}


def test_binary_buffers_stay_mutable() -> None:
    body = bytearray(b"abc")
    frozen = deep_freeze({"body": body})

    assert frozen["body"] is body
    frozen["body"].extend(b"def")
    assert body == bytearray(b"abcdef")


def test_streams_keep_read_position() -> None:
    stream = io.BytesIO(b"file contents")
    stream.read(5)
    frozen = deep_freeze({"upload": {"body": stream}})

    assert frozen["upload"]["body"] is stream
    assert frozen["upload"]["body"].read() == b"contents"


def test_generators_are_payloads() -> None:
    chunks = (chunk for chunk in (b"a", b"b"))
    assert is_payload(chunks)
    assert deep_freeze([chunks])[0] is chunks


def test_plain_values_are_not_payloads() -> None:
    assert not is_payload(b"immutable bytes")
    assert not is_payload({"a": 1})
    assert not is_payload("text")


def test_thaw_returns_mutable_copy() -> None:
    stream = io.BytesIO(b"x")
    frozen = deep_freeze({"nested": {"items": [1, 2]}, "stream": stream})

    thawed = thaw(frozen)
    thawed["nested"]["items"].append(3)

    assert isinstance(thawed["nested"], dict)
    assert frozen["nested"]["items"] == (1, 2)
    assert thawed["stream"] is stream


def test_merge_rightmost_wins_and_keeps_siblings() -> None:
    base = {"request": {"strict_ssl": True, "json": True}, "num_max_retries": 5}
    merged = merge(base, {"request": {"strict_ssl": False}}, {"num_max_retries": 10})

    assert merged == {"request": {"strict_ssl": False, "json": True}, "num_max_retries": 10}


def test_merge_does_not_mutate_sources() -> None:
    base = {"request": {"headers": {"User-Agent": "sdk"}}, "items": [1]}
    override = {"request": {"headers": {"X-Extra": "1"}}}
    merged = merge(base, override)
    merged["request"]["headers"]["X-Other"] = "2"
    merged["items"].append(2)

    assert base == {"request": {"headers": {"User-Agent": "sdk"}}, "items": [1]}
    assert override == {"request": {"headers": {"X-Extra": "1"}}}


def test_merge_reads_frozen_sources() -> None:
    frozen = deep_freeze({"proxy": {"url": None, "username": None}})
    merged = merge(frozen, {"proxy": {"url": "http://proxy:3128"}})

    assert merged == {"proxy": {"url": "http://proxy:3128", "username": None}}
    assert isinstance(merged["proxy"], dict)


def test_merge_none_does_not_override() -> None:
    merged = merge({"api_root_url": "https://api.box.com"}, {"api_root_url": None, "extra": None})
    assert merged == {"api_root_url": "https://api.box.com", "extra": None}


def test_merge_carries_payloads_by_reference() -> None:
    stream = io.BytesIO(b"data")
    assert merge({"body": None}, {"body": stream})["body"] is stream
