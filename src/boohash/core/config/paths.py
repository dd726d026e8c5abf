"""Path resolution helpers for boohash configuration and logs."""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping

from platformdirs import PlatformDirs

CONFIG_DIR_ENV = "BOOHASH_CONFIG_DIR"
DATA_DIR_ENV = "BOOHASH_DATA_DIR"


class AppPaths:
    """Resolve application directories with support for dependency injection."""

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        *,
        app_name: str = "boohash",
        config_env_var: str = CONFIG_DIR_ENV,
        data_env_var: str = DATA_DIR_ENV,
        platform_dirs_factory: Callable[[str], PlatformDirs] | None = None,
    ) -> None:
        self._env = MappingProxyType(dict(env) if env is not None else dict(os.environ))
        self._app_name = app_name
        self._config_env_var = config_env_var
        self._data_env_var = data_env_var
        self._platform_dirs_factory = platform_dirs_factory or self._default_platform_dirs

    @staticmethod
    def _default_platform_dirs(app_name: str) -> PlatformDirs:
        return PlatformDirs(appname=app_name, appauthor=False, roaming=True)

    def _platform_dirs(self) -> PlatformDirs:
        return self._platform_dirs_factory(self._app_name)

    def _override(self, name: str) -> Path | None:
        value = self._env.get(name)
        if value:
            return Path(value).expanduser()
        return None

    def config_dir(self) -> Path:
        """Return the directory holding ``config.yaml``."""

        return self._override(self._config_env_var) or Path(self._platform_dirs().user_config_dir)

    def config_path(self, filename: str = "config.yaml") -> Path:
        """Return the full path to the configuration file."""

        return self.config_dir() / filename

    def data_dir(self) -> Path:
        """Return the directory used for persistent application data."""

        return self._override(self._data_env_var) or Path(self._platform_dirs().user_data_dir)

    def log_dir(self) -> Path:
        """Return the directory used to store log files."""

        return self.data_dir() / "logs"

    def log_path(self) -> Path:
        return self.log_dir() / "boohash.log"


__all__ = ["AppPaths", "CONFIG_DIR_ENV", "DATA_DIR_ENV"]
