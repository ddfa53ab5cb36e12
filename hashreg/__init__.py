"""
hashreg - cryptographic hash function identifier registry.

Names every supported hash function with a stable integer identity, knows
each one's digest size, and hands out fresh streaming accumulators from
whichever library implements it.

Usage:
    from hashreg import Hash, get_default_registry

    registry = get_default_registry()
    if registry.available(Hash.SHA3_256):
        h = registry.new(Hash.SHA3_256)
"""

from .core import (
    DIGEST_SIZES,
    MAX_HASH,
    DuplicateRegistrationError,
    Hash,
    HashPreconditionError,
    HashregException,
    HashRegistry,
    HashUnavailableError,
    RegistryFrozenError,
    UnknownHashError,
    bootstrap,
    digest_size,
    display_name,
    get_default_registry,
)
from .core.interfaces import Accumulator

__all__ = [
    "DIGEST_SIZES",
    "MAX_HASH",
    "Accumulator",
    "DuplicateRegistrationError",
    "Hash",
    "HashPreconditionError",
    "HashRegistry",
    "HashUnavailableError",
    "HashregException",
    "RegistryFrozenError",
    "UnknownHashError",
    "bootstrap",
    "digest_size",
    "display_name",
    "get_default_registry",
]
