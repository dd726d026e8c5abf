"""Tests for settings defaults and the module-level settings helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from boohash.core.config import AppPaths, HashSettings, config_path, load_settings, save_settings
from boohash.utils.hash import MAX_CHUNK_SIZE


def test_defaults() -> None:
    settings = HashSettings()

    assert settings.chunk_size == 1024
    assert settings.log_level == "WARNING"
    assert settings.log_to_file is False
    assert settings.report_timing is True


@pytest.mark.parametrize(("value", "expected"), [("2048", 2048), (0, 1), (-5, 1), ("junk", 1024), (None, 1024)])
def test_chunk_size_is_coerced(value: object, expected: int) -> None:
    assert HashSettings(chunk_size=value).chunk_size == expected


@pytest.mark.parametrize(("value", "expected"), [("debug", "DEBUG"), (" Info ", "INFO"), ("loud", "WARNING"), ("", "WARNING")])
def test_log_level_is_normalised(value: str, expected: str) -> None:
    assert HashSettings(log_level=value).log_level == expected


def test_from_mapping_tolerates_none() -> None:
    assert HashSettings.from_mapping(None) == HashSettings()


def test_module_helpers_use_configured_paths(isolated_app_paths: AppPaths) -> None:
    assert config_path() == isolated_app_paths.config_path()
    assert load_settings() == HashSettings()

    save_settings(HashSettings(chunk_size=8))

    assert Path(config_path()).exists()
    assert load_settings().chunk_size == 8


@pytest.mark.parametrize("value", [10**20, MAX_CHUNK_SIZE + 1])
def test_chunk_size_is_capped(value: int) -> None:
    assert HashSettings(chunk_size=value).chunk_size == MAX_CHUNK_SIZE


def test_infinite_chunk_size_falls_back_to_default() -> None:
    assert HashSettings(chunk_size=float("inf")).chunk_size == 1024
