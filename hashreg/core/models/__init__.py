"""Pydantic models for hashreg configuration."""

from .base import HashregBaseModel
from .config import (
    ConfigBaseModel,
    LoggingConfig,
    ProvidersConfig,
    RegistryConfig,
)

__all__ = [
    "ConfigBaseModel",
    "HashregBaseModel",
    "LoggingConfig",
    "ProvidersConfig",
    "RegistryConfig",
]
