"""Load, default, and persist the user configuration file."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable

from .config import Config
from .errors import MalformedConfigFile, PermissionDenied, PermissionType
from .utils.paths import CONFIG_FILE_NAME, project_dir

logger = logging.getLogger(__name__)


class ConfigStore:
    """Read and update the configuration record kept in ``config_dir``.

    When no directory is given, the per-user project directory is resolved
    once at construction time.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = config_dir if config_dir is not None else project_dir().config_dir

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def path(self) -> Path:
        return self._config_dir / CONFIG_FILE_NAME

    def user_config(self) -> Config:
        """Return the stored record, writing the defaults if no file exists yet."""
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PermissionDenied(PermissionType.CREATE, self._config_dir) from exc

        path = self.path
        try:
            with path.open("r", encoding="utf-8") as handle:
                text = handle.read()
        except FileNotFoundError:
            logger.info("No configuration found; writing defaults to %s", path)
            config = Config()
            self.write_config(config)
            return config
        except UnicodeDecodeError as exc:
            raise MalformedConfigFile(path) from exc
        except OSError as exc:
            raise PermissionDenied(PermissionType.READ, path) from exc

        logger.debug("Loaded configuration from %s", path)
        try:
            return Config.from_yaml(text)
        except ValueError as exc:
            raise MalformedConfigFile(path) from exc

    def write_config(self, config: Config) -> None:
        """Replace the configuration file with ``config``.

        The record is written to a temporary file next to the target and
        renamed over it, so readers never observe a partial file. A symlinked
        file is updated through the link and keeps its permission bits.
        """
        path = self.path
        target = path.resolve()
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
        except OSError as exc:
            raise PermissionDenied(PermissionType.CREATE, path) from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(config.to_yaml())
            if target.exists():
                shutil.copymode(target, tmp_path)
            os.replace(tmp_path, target)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise PermissionDenied(PermissionType.WRITE, path) from exc

    def update(self, mutate: Callable[[Config], None]) -> Config:
        """Reload the record, apply ``mutate`` to it and persist the result."""
        config = self.user_config()
        mutate(config)
        self.write_config(config)
        return config

    def set_api_key(self, key: str) -> None:
        """Store ``key`` as the API key, leaving the other settings untouched."""

        def _apply(config: Config) -> None:
            config.api_key = key

        self.update(_apply)
        logger.info("Stored API key in %s", self.path)


def user_config() -> Config:
    """Return the user's configuration, creating a default file if needed."""
    return ConfigStore().user_config()


def set_api_key(key: str) -> None:
    """Persist ``key`` in the user's configuration file."""
    ConfigStore().set_api_key(key)
