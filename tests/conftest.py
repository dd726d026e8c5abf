"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from boohash.core import config as config_module
from boohash.core.config import AppPaths


def _clear_logging_handlers() -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()


@pytest.fixture(autouse=True)
def isolated_app_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[AppPaths]:
    """Point configuration and log directories at a per-test location."""

    for name in ("BOOHASH_LOG_LEVEL", "BOOHASH_CHUNK_SIZE"):
        monkeypatch.delenv(name, raising=False)
    root = tmp_path / "appdirs"
    app_paths = AppPaths(env={"BOOHASH_CONFIG_DIR": str(root / "config"), "BOOHASH_DATA_DIR": str(root / "data")})
    previous = config_module.get_app_paths()
    config_module.configure(app_paths)
    yield app_paths
    config_module.configure(previous)
    _clear_logging_handlers()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample1.txt"
    path.write_bytes(b"abc")
    return path
