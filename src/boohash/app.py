"""Command-line entry point for boohash."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Sequence

from boohash.core.config import HashSettings, get_app_paths, load_settings
from boohash.core.engine import compute_digest
from boohash.core.errors import ConfigError, DigestError, OutputWriteError
from boohash.core.resolver import USAGE, build, is_help_request
from boohash.core.router import format_digest_line, route
from boohash.utils.env import LOG_LEVEL_ENV, chunk_size_override, env_value

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _resolve_log_level(value: str | None) -> int:
    if not value:
        return logging.WARNING
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def setup_logging(level: str | None = None, *, log_file: Path | None = None) -> None:
    """Configure logging to stderr and, optionally, a rotating log file."""

    resolved = _resolve_log_level(level)
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(resolved)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )

    # stdout is reserved for the digest itself
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(resolved)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file is None:
        return

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as exc:
        logger.warning("Unable to open log file %s, logging to stderr only: %s", log_file, exc)
        return

    file_handler.setLevel(resolved)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)


def _bootstrap() -> HashSettings:
    settings = load_settings()
    log_file = get_app_paths().log_path() if settings.log_to_file else None
    setup_logging(env_value(LOG_LEVEL_ENV) or settings.log_level, log_file=log_file)
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    """Run one invocation and return the process exit code."""

    tokens = list(sys.argv if argv is None else argv)

    # help and argument errors exit before settings or log files are touched
    if is_help_request(tokens):
        print(USAGE)
        return EXIT_OK

    try:
        config = build(tokens)
    except ConfigError as exc:
        print(f"Problem parsing arguments: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return EXIT_FAILURE

    settings = _bootstrap()

    chunk_size = chunk_size_override(settings.chunk_size)
    try:
        digest = compute_digest(config, chunk_size=chunk_size, report_timing=settings.report_timing)
    except DigestError as exc:
        logger.debug("Digest failed: %s", exc.kind.value)
        print(f"Error returned: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        route(config, digest)
    except OutputWriteError as exc:
        print(f"Error returned: {exc}", file=sys.stderr)
        print(format_digest_line(config, exc.digest), file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
