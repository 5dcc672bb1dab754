"""Exceptions raised while resolving, loading, or persisting configuration."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class PermissionType(str, Enum):
    """File system operations that can be refused."""

    CREATE = "create"
    WRITE = "write"
    READ = "read"


class ConfigError(RuntimeError):
    """Base class for configuration failures surfaced to callers."""


class ProjectDirectoryUnavailable(ConfigError):
    """Raised when the host provides no resolvable per-user directory."""

    def __init__(self, detail: str | None = None) -> None:
        message = "Couldn't find a suitable project directory to store cache and configuration"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class PermissionDenied(ConfigError):
    """Raised when a directory or file cannot be created, written, or read."""

    def __init__(self, operation: PermissionType, path: Path) -> None:
        self.operation = operation
        self.path = path
        super().__init__(f"Couldn't {operation.value} {path}. Please check the permissions.")


class MalformedConfigFile(ConfigError):
    """Raised when an existing configuration file cannot be parsed."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Invalid configuration file at {path}. Fix or delete it to continue.")
