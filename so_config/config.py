"""The persisted configuration record and its YAML representation."""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LIMIT = 20
DEFAULT_SITE = "stackoverflow"

# Keys that must be present in a file on disk; ``api_key`` may be omitted.
REQUIRED_KEYS = ("limit", "site")


class Config(BaseModel):
    """User settings consumed by the ``so`` command line application."""

    model_config = ConfigDict(extra="forbid", strict=True, validate_assignment=True)

    api_key: str | None = Field(
        default=None,
        description="Credential for the Stack Exchange API; unset until explicitly stored.",
    )
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=0,
        le=65535,
        description="Maximum number of results requested per query.",
    )
    site: str = Field(
        default=DEFAULT_SITE,
        description="Stack Exchange site to search.",
    )

    @field_validator("api_key", "site", mode="before")
    @classmethod
    def _stringify_plain_scalars(cls, value: Any) -> Any:
        # Hand-edited files may leave numeric values unquoted.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def as_dict(self) -> dict[str, Any]:
        """Serialize the record to primitive Python types in field order."""
        return self.model_dump(mode="json")

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.as_dict(), allow_unicode=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str) -> Config:
        """Parse a YAML document into a record.

        Raises ``ValueError`` when the document is not valid YAML, is not a
        mapping, lacks a required key, or fails validation.
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping, found {type(data).__name__}")

        missing = [key for key in REQUIRED_KEYS if key not in data]
        if missing:
            raise ValueError(f"Missing required keys: {', '.join(missing)}")

        return cls.model_validate(data)
