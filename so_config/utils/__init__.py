"""Utility helpers for the so configuration library."""

from .paths import ProjectDirs, config_file_path, project_dir

__all__ = ["ProjectDirs", "config_file_path", "project_dir"]
