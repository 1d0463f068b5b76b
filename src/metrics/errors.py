"""Exceptions raised by the statistics helpers."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a rollup receives no records or a non-finite measurement."""


__all__ = ["InvalidInputError"]
