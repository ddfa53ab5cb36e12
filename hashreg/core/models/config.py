"""
Configuration models.

Provides Pydantic models for hashreg configuration with validation.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import NoDecode

from ..identity import Hash
from .base import HashregBaseModel

# Type aliases
DuplicatePolicy = Literal["replace", "reject"]
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(HashregBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class RegistryConfig(ConfigBaseModel):
    """Registry behaviour section."""

    duplicates: DuplicatePolicy = "replace"
    freeze: bool = True


class ProvidersConfig(ConfigBaseModel):
    """Provider selection section."""

    # NoDecode keeps HASHREG_PROVIDERS__DISABLED away from the JSON decoder
    disabled: Annotated[list[str], NoDecode] = Field(default_factory=list)

    @field_validator("disabled", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: Any) -> list[str]:
        """Parse a comma-separated or JSON list string to list."""
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [x.strip() for x in v.split(",") if x.strip()]
        return v

    @field_validator("disabled")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Every entry must name a known hash function."""
        for name in v:
            Hash.from_name(name)
        return v

    def disabled_identities(self) -> list[Hash]:
        """Resolve the disabled names to identities."""
        return [Hash.from_name(name) for name in self.disabled]


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
