"""Services for loading and persisting user settings."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .paths import AppPaths
from .schema import HashSettings

logger = logging.getLogger(__name__)


class SettingsService:
    """Load, validate and persist :class:`HashSettings`."""

    def __init__(self, app_paths: AppPaths, *, filename: str = "config.yaml") -> None:
        self._app_paths = app_paths
        self._filename = filename

    @property
    def config_path(self) -> Path:
        """Path to the configuration file."""

        return self._app_paths.config_path(self._filename)

    def load(self) -> HashSettings:
        """Load the settings from disk with graceful fallbacks."""

        path = self.config_path
        if not path.exists():
            return HashSettings()

        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Unable to read settings from %s: %s", path, exc)
            return HashSettings()

        try:
            raw_data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            logger.warning("Invalid YAML in %s: %s", path, exc)
            return HashSettings()

        try:
            return HashSettings.from_mapping(raw_data)
        except ValidationError as exc:
            logger.warning("Ignoring invalid settings in %s: %s", path, exc)
            return HashSettings()

    def save(self, settings: HashSettings) -> None:
        """Persist the settings to disk."""

        path = self.config_path
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            path.write_text(yaml.safe_dump(settings.to_mapping(), sort_keys=False), encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write settings to %s: %s", path, exc)
            raise


__all__ = ["SettingsService"]
