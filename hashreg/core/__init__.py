"""
Core of hashreg: hash identities, the registry and its bootstrap.

This module provides:
- Hash: the closed enumeration of hash identities
- HashRegistry: identity -> constructor table
- bootstrap(): builds the process-wide registry from settings
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, get_default_registry, is_initialized, reset
from .exceptions import (
    ConfigFileError,
    DuplicateRegistrationError,
    HashPreconditionError,
    HashregConfigError,
    HashregException,
    HashRegistryError,
    HashUnavailableError,
    RegistryFrozenError,
    UnknownHashError,
)
from .identity import DIGEST_SIZES, MAX_HASH, Hash, digest_size, display_name
from .registry import HashRegistry

__all__ = [
    "DIGEST_SIZES",
    "MAX_HASH",
    "ConfigFileError",
    "DuplicateRegistrationError",
    "Hash",
    "HashPreconditionError",
    "HashRegistry",
    "HashRegistryError",
    "HashUnavailableError",
    "HashregConfigError",
    "HashregException",
    "RegistryFrozenError",
    "UnknownHashError",
    "bootstrap",
    "digest_size",
    "display_name",
    "get_default_registry",
    "is_initialized",
    "reset",
]
