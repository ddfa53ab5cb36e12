"""
Hash function identities.

Each member of Hash names a cryptographic hash function that is implemented
by some other library. The numeric values are stable across releases and
must never be reassigned.
"""

from __future__ import annotations

import re
from enum import IntEnum
from types import MappingProxyType

from .exceptions import HashPreconditionError, UnknownHashError


class Hash(IntEnum):
    """Identifies a cryptographic hash function implemented elsewhere."""

    MD4 = 1  # Crypto.Hash.MD4
    MD5 = 2  # hashlib
    SHA1 = 3  # hashlib
    SHA224 = 4  # hashlib
    SHA256 = 5  # hashlib
    SHA384 = 6  # hashlib
    SHA512 = 7  # hashlib
    MD5SHA1 = 8  # no implementation; MD5+SHA1 used for TLS RSA
    RIPEMD160 = 9  # Crypto.Hash.RIPEMD160
    SHA3_224 = 10  # hashlib
    SHA3_256 = 11  # hashlib
    SHA3_384 = 12  # hashlib
    SHA3_512 = 13  # hashlib
    SHA512_224 = 14  # Crypto.Hash.SHA512
    SHA512_256 = 15  # Crypto.Hash.SHA512
    BLAKE2s_256 = 16  # hashlib
    BLAKE2b_256 = 17  # hashlib
    BLAKE2b_384 = 18  # hashlib
    BLAKE2b_512 = 19  # hashlib
    SM3 = 20  # hashlib, when OpenSSL provides it
    BLAKE3 = 21  # blake3

    def __str__(self) -> str:
        return _NAMES[self]

    @property
    def display_name(self) -> str:
        """Canonical published name, e.g. 'SHA-512/256'."""
        return _NAMES[self]

    @property
    def size(self) -> int:
        """Digest length in bytes. Does not require an implementation."""
        return DIGEST_SIZES[self]

    @classmethod
    def from_name(cls, name: str) -> Hash:
        """
        Resolve a hash name to its identity.

        Accepts display names ("SHA-512/256"), member names ("SHA512_256")
        and hashlib spellings ("sha512_256"). Case and punctuation are
        ignored.

        Raises:
            UnknownHashError: If no identity matches
        """
        identity = _BY_KEY.get(_name_key(name))
        if identity is None:
            raise UnknownHashError(f"Unknown hash function: {name}", name=name)
        return identity


# Sentinel upper bound used to size tables. Never a valid identity.
MAX_HASH = max(Hash) + 1

_NAMES: MappingProxyType[Hash, str] = MappingProxyType(
    {
        Hash.MD4: "MD4",
        Hash.MD5: "MD5",
        Hash.SHA1: "SHA-1",
        Hash.SHA224: "SHA-224",
        Hash.SHA256: "SHA-256",
        Hash.SHA384: "SHA-384",
        Hash.SHA512: "SHA-512",
        Hash.MD5SHA1: "MD5+SHA1",
        Hash.RIPEMD160: "RIPEMD-160",
        Hash.SHA3_224: "SHA3-224",
        Hash.SHA3_256: "SHA3-256",
        Hash.SHA3_384: "SHA3-384",
        Hash.SHA3_512: "SHA3-512",
        Hash.SHA512_224: "SHA-512/224",
        Hash.SHA512_256: "SHA-512/256",
        Hash.BLAKE2s_256: "BLAKE2s-256",
        Hash.BLAKE2b_256: "BLAKE2b-256",
        Hash.BLAKE2b_384: "BLAKE2b-384",
        Hash.BLAKE2b_512: "BLAKE2b-512",
        Hash.SM3: "SM3",
        Hash.BLAKE3: "BLAKE3",
    }
)

DIGEST_SIZES: MappingProxyType[Hash, int] = MappingProxyType(
    {
        Hash.MD4: 16,
        Hash.MD5: 16,
        Hash.SHA1: 20,
        Hash.SHA224: 28,
        Hash.SHA256: 32,
        Hash.SHA384: 48,
        Hash.SHA512: 64,
        Hash.SHA512_224: 28,
        Hash.SHA512_256: 32,
        Hash.SHA3_224: 28,
        Hash.SHA3_256: 32,
        Hash.SHA3_384: 48,
        Hash.SHA3_512: 64,
        Hash.MD5SHA1: 36,
        Hash.RIPEMD160: 20,
        Hash.BLAKE2s_256: 32,
        Hash.BLAKE2b_256: 32,
        Hash.BLAKE2b_384: 48,
        Hash.BLAKE2b_512: 64,
        Hash.SM3: 32,
        Hash.BLAKE3: 32,
    }
)


def _name_key(name: str) -> str:
    return re.sub(r"[^0-9A-Z]", "", name.upper())


_BY_KEY: dict[str, Hash] = {}
for _h in Hash:
    _BY_KEY[_name_key(_h.name)] = _h
    _BY_KEY[_name_key(_NAMES[_h])] = _h
del _h


def to_identity(value: object) -> Hash | None:
    """
    Return the Hash member for value, or None if value is not a valid identity.

    Zero, negative numbers, values at or past MAX_HASH and non-integers all
    map to None. Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if 0 < value < MAX_HASH:
        return Hash(value)
    return None


def display_name(value: object) -> str:
    """
    Human-readable name for any value.

    Never raises: values outside the enumeration produce a placeholder that
    embeds the raw value, since this is mostly used in error messages.
    """
    identity = to_identity(value)
    if identity is not None:
        return _NAMES[identity]
    try:
        return f"unknown hash value {value}"
    except ValueError:
        if isinstance(value, int):
            # Past the int-to-str digit limit; hex formatting has none
            return f"unknown hash value {value:#x}"
        return "unknown hash value"


def digest_size(value: object) -> int:
    """
    Digest length in bytes for the given identity.

    Raises:
        HashPreconditionError: If value is not in the enumeration
    """
    identity = to_identity(value)
    if identity is None:
        raise HashPreconditionError("Size of unknown hash function", identity=value)
    return DIGEST_SIZES[identity]
