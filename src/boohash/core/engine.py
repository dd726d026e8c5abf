"""Streaming digest engine."""

from __future__ import annotations

import logging
from pathlib import Path

from boohash.core.errors import InputFileNotFoundError, InputFileUnreadableError, ReadError
from boohash.core.resolver import Configuration
from boohash.utils.hash import DEFAULT_CHUNK_SIZE, MAX_CHUNK_SIZE, hash_stream, to_hex
from boohash.utils.perf_timer import PerfTimer

logger = logging.getLogger(__name__)


def compute_digest(
    config: Configuration,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    report_timing: bool = False,
) -> str:
    """Return the lowercase hex digest of ``config.input_path``.

    The file is read in ``chunk_size`` pieces so memory use does not depend on
    the file size. Open failures raise :class:`InputFileNotFoundError` or
    :class:`InputFileUnreadableError`; failures while streaming raise
    :class:`ReadError`. The handle is closed on every path.
    """

    if not 1 <= chunk_size <= MAX_CHUNK_SIZE:
        raise ValueError(f"chunk_size must be between 1 and {MAX_CHUNK_SIZE}, got {chunk_size}")

    path = Path(config.input_path)
    algorithm = config.command
    try:
        handle = path.open("rb")
    except FileNotFoundError as exc:
        raise InputFileNotFoundError(f"input file not found: {path}") from exc
    except OSError as exc:
        raise InputFileUnreadableError(f"cannot open input file {path}: {exc.strerror or exc}") from exc

    with handle:
        hasher = algorithm.new_hasher()
        try:
            with PerfTimer(f"{path} {algorithm.label}", logger=logger, enabled=report_timing):
                digest = hash_stream(handle, hasher, chunk_size=chunk_size)
        except OSError as exc:
            raise ReadError(f"failed reading {path}: {exc.strerror or exc}") from exc

    logger.debug("Hashed %s with %s (chunk_size=%d)", path, algorithm.value, chunk_size)
    return to_hex(digest)


__all__ = ["compute_digest"]
