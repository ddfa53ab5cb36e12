"""
Algorithm providers.

Each provider supplies one hash identity and a constructor backed by a real
hash library (hashlib, pycryptodome, blake3). New algorithms are added by
registering another provider, never by editing the registry.
"""

from .defaults import default_providers, register_defaults
from .strategies import (
    Blake3Provider,
    HashlibProvider,
    HashProvider,
    MD4Provider,
    OpenSSLProvider,
    RIPEMD160Provider,
    TruncatedSHA512Provider,
    UnimplementedProvider,
)

__all__ = [
    "Blake3Provider",
    "HashProvider",
    "HashlibProvider",
    "MD4Provider",
    "OpenSSLProvider",
    "RIPEMD160Provider",
    "TruncatedSHA512Provider",
    "UnimplementedProvider",
    "default_providers",
    "register_defaults",
]
