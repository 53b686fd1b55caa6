"""Error types raised while building SDK configuration."""

from __future__ import annotations


class InvalidConfiguration(AssertionError):
    """Raised when configuration options fail validation."""


__all__ = ["InvalidConfiguration"]
