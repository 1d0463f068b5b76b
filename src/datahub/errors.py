"""Errors raised while loading chart data."""

from __future__ import annotations


class DataError(ValueError):
    """A CSV file is missing, malformed, or holds a non-numeric measurement."""


__all__ = ["DataError"]
