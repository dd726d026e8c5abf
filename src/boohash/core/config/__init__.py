"""Settings primitives for boohash."""

from __future__ import annotations

from pathlib import Path

from .paths import AppPaths
from .schema import HashSettings
from .service import SettingsService

_APP_PATHS = AppPaths()
_SERVICE = SettingsService(_APP_PATHS)


def configure(app_paths: AppPaths) -> None:
    """Replace the default :class:`SettingsService` dependencies."""

    global _APP_PATHS, _SERVICE
    _APP_PATHS = app_paths
    _SERVICE = SettingsService(_APP_PATHS)


def get_app_paths() -> AppPaths:
    """Return the current :class:`AppPaths` instance."""

    return _APP_PATHS


def config_path() -> Path:
    """Return the path to the configuration file."""

    return _SERVICE.config_path


def load_settings() -> HashSettings:
    """Load settings using the shared service."""

    return _SERVICE.load()


def save_settings(settings: HashSettings) -> None:
    """Persist settings using the shared service."""

    _SERVICE.save(settings)


__all__ = [
    "AppPaths",
    "HashSettings",
    "SettingsService",
    "config_path",
    "configure",
    "get_app_paths",
    "load_settings",
    "save_settings",
]
