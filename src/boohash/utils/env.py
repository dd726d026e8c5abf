"""Helpers for interrogating runtime environment overrides."""

from __future__ import annotations

import os
from typing import SupportsIndex, SupportsInt

from boohash.utils.hash import MAX_CHUNK_SIZE

LOG_LEVEL_ENV = "BOOHASH_LOG_LEVEL"
CHUNK_SIZE_ENV = "BOOHASH_CHUNK_SIZE"


def env_value(name: str) -> str | None:
    """Return the stripped value of ``name`` or ``None`` when unset or blank."""
    value = os.environ.get(name, "").strip()
    return value or None


def safe_int(
    value: SupportsInt | SupportsIndex | str | None,
    default: int,
    *,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Safely coerce ``value`` to :class:`int`, returning ``default`` on failure.

    Empty strings, ``None`` and malformed values silently fall back to
    ``default``. Optional ``min_value`` and ``max_value`` bounds can be
    supplied to clamp the acceptable range; any value outside the range is
    treated as invalid and therefore falls back to ``default``.
    """

    candidate = value
    if candidate is None:
        return default
    if isinstance(candidate, str):
        candidate = candidate.strip()
        if candidate == "":
            return default

    try:
        coerced = int(candidate)
    except (TypeError, ValueError, OverflowError):
        return default

    if min_value is not None and coerced < min_value:
        return default
    if max_value is not None and coerced > max_value:
        return default
    return coerced


def chunk_size_override(default: int) -> int:
    """Return the chunk size from ``BOOHASH_CHUNK_SIZE`` or ``default``."""
    return safe_int(env_value(CHUNK_SIZE_ENV), default, min_value=1, max_value=MAX_CHUNK_SIZE)


__all__ = ["CHUNK_SIZE_ENV", "LOG_LEVEL_ENV", "chunk_size_override", "env_value", "safe_int"]
