"""Top-level package for the so configuration library."""

from .config import Config
from .config_store import ConfigStore, set_api_key, user_config
from .errors import (
    ConfigError,
    MalformedConfigFile,
    PermissionDenied,
    PermissionType,
    ProjectDirectoryUnavailable,
)
from .utils.paths import ProjectDirs, config_file_path, project_dir

__all__ = [
    "Config",
    "ConfigError",
    "ConfigStore",
    "MalformedConfigFile",
    "PermissionDenied",
    "PermissionType",
    "ProjectDirectoryUnavailable",
    "ProjectDirs",
    "config_file_path",
    "project_dir",
    "set_api_key",
    "user_config",
]
