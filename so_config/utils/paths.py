"""Resolve where the per-user configuration lives."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import PlatformDirs

from ..errors import ProjectDirectoryUnavailable

logger = logging.getLogger(__name__)

QUALIFIER = "io"
ORGANIZATION = "Sam Tay"
APPLICATION = "so"
CONFIG_FILE_NAME = "config.yml"


@dataclass(frozen=True, slots=True)
class ProjectDirs:
    """Per-user directories derived from the application identity."""

    config_dir: Path

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME


def project_dir() -> ProjectDirs:
    """Return the OS-appropriate project directories for ``so``.

    Raises
    ------
    ProjectDirectoryUnavailable
        If the environment gives no usable home or configuration directory.
    """

    app_name = _app_name()
    try:
        dirs = PlatformDirs(appname=app_name, appauthor=ORGANIZATION, roaming=True)
        config_dir = Path(dirs.user_config_dir)
        if not config_dir.is_absolute() and _relative_xdg_config_home():
            # Relative XDG values are invalid and must be ignored.
            config_dir = Path(os.path.expanduser("~/.config")) / app_name
    except (KeyError, OSError, RuntimeError) as exc:
        raise ProjectDirectoryUnavailable(str(exc)) from exc

    # An unexpanded "~" means no home directory could be determined.
    if not config_dir.is_absolute():
        raise ProjectDirectoryUnavailable(f"resolved to {config_dir}")

    logger.debug("Resolved project config directory %s", config_dir)
    return ProjectDirs(config_dir=config_dir)


def config_file_path() -> Path:
    """Return the full path of the configuration file."""
    return project_dir().config_file


def _app_name() -> str:
    # macOS uses a bundle identifier built from the whole identity.
    if sys.platform == "darwin":
        return ".".join(
            part.replace(" ", "-") for part in (QUALIFIER, ORGANIZATION, APPLICATION)
        )
    return APPLICATION


def _relative_xdg_config_home() -> bool:
    if sys.platform in ("win32", "darwin"):
        return False
    value = os.environ.get("XDG_CONFIG_HOME", "").strip()
    return bool(value) and not os.path.isabs(value)
