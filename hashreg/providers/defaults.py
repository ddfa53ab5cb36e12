"""
Default provider set.

register_defaults() is the startup registration phase: it gives every
identity in the enumeration a slot, with a constructor where a library
can supply one.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

from ..core.identity import Hash
from ..core.registry import HashRegistry
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


def default_providers() -> list[HashProvider]:
    """Build one provider per identity, in identity order."""
    return [
        MD4Provider(),
        HashlibProvider(Hash.MD5, hashlib.md5),
        HashlibProvider(Hash.SHA1, hashlib.sha1),
        HashlibProvider(Hash.SHA224, hashlib.sha224),
        HashlibProvider(Hash.SHA256, hashlib.sha256),
        HashlibProvider(Hash.SHA384, hashlib.sha384),
        HashlibProvider(Hash.SHA512, hashlib.sha512),
        UnimplementedProvider(Hash.MD5SHA1),
        RIPEMD160Provider(),
        HashlibProvider(Hash.SHA3_224, hashlib.sha3_224),
        HashlibProvider(Hash.SHA3_256, hashlib.sha3_256),
        HashlibProvider(Hash.SHA3_384, hashlib.sha3_384),
        HashlibProvider(Hash.SHA3_512, hashlib.sha3_512),
        TruncatedSHA512Provider(Hash.SHA512_224),
        TruncatedSHA512Provider(Hash.SHA512_256),
        HashlibProvider(Hash.BLAKE2s_256, hashlib.blake2s, digest_size=32),
        HashlibProvider(Hash.BLAKE2b_256, hashlib.blake2b, digest_size=32),
        HashlibProvider(Hash.BLAKE2b_384, hashlib.blake2b, digest_size=48),
        HashlibProvider(Hash.BLAKE2b_512, hashlib.blake2b, digest_size=64),
        OpenSSLProvider(Hash.SM3, "sm3"),
        Blake3Provider(),
    ]


def register_defaults(registry: HashRegistry, disabled: Iterable[int] = ()) -> None:
    """
    Register the default providers.

    Args:
        registry: Registry still in its registration phase
        disabled: Identities to register as unavailable even when a
            library for them is present
    """
    skip = {int(h) for h in disabled}
    for provider in default_providers():
        if int(provider.identity) in skip:
            registry.register(provider.identity, None)
        else:
            provider.register(registry)
