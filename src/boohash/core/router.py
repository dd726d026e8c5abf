"""Deliver a computed digest to a file or to standard output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from boohash.core.errors import OutputWriteError
from boohash.core.resolver import Configuration

logger = logging.getLogger(__name__)


def format_digest_line(config: Configuration, digest: str) -> str:
    return f"{config.command.label}: {digest}"


def write_digest_file(path: Path, digest: str) -> Path:
    """Create or truncate ``path`` and write exactly the ASCII hex digest."""

    try:
        path.write_bytes(digest.encode("ascii"))
    except OSError as exc:
        raise OutputWriteError(f"failed to write digest to {path}: {exc.strerror or exc}", digest=digest) from exc
    return path


def route(config: Configuration, digest: str, *, stream: TextIO | None = None) -> Path | None:
    """Write ``digest`` to ``-f`` when given, otherwise print it.

    Returns the output path when a file was written and ``None`` otherwise.
    """

    out = stream if stream is not None else sys.stdout
    if config.output_path is None:
        print(format_digest_line(config, digest), file=out)
        return None

    path = write_digest_file(Path(config.output_path), digest)
    logger.info("Wrote %s digest to %s", config.command.value, path)
    print(f"{config.command.label} digest written to {path}", file=out)
    return path


__all__ = ["format_digest_line", "route", "write_digest_file"]
