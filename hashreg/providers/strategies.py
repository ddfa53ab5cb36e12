"""
Algorithm provider implementations.

Each provider claims one hash identity and knows how to build a fresh
accumulator for it with some hash library. Providers whose library is
missing still register, with no constructor, so the identity stays known
but unavailable.
"""

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from Crypto.Hash import MD4, RIPEMD160, SHA512

from ..core.identity import Hash
from ..core.interfaces.accumulator import Accumulator
from ..core.registry import HashRegistry

try:
    import blake3 as _blake3

    blake3: Any | None = _blake3
except ImportError:
    blake3 = None


class HashProvider(ABC):
    """
    Abstract base class for algorithm providers.

    Implementations must provide:
    - identity: The Hash identity this provider claims
    - create_accumulator(): Factory method for accumulator instances
    """

    @property
    @abstractmethod
    def identity(self) -> Hash:
        """Return the claimed identity (e.g., Hash.SHA256)."""
        pass

    @abstractmethod
    def create_accumulator(self) -> Accumulator:
        """Create a new accumulator instance."""
        pass

    def is_supported(self) -> bool:
        """Whether the backing library is usable in this process."""
        return True

    @property
    def constructor(self) -> Callable[[], Accumulator] | None:
        """The factory to register, or None if the library is missing."""
        if not self.is_supported():
            return None
        return self.create_accumulator

    def register(self, registry: HashRegistry) -> None:
        """Register this provider's constructor with the registry."""
        registry.register(self.identity, self.constructor)


class HashlibProvider(HashProvider):
    """Algorithms from the standard hashlib module."""

    def __init__(self, identity: Hash, factory: Callable[..., Any], **params: Any) -> None:
        self._identity = identity
        self._factory = factory
        self._params = params

    @property
    def identity(self) -> Hash:
        return self._identity

    def create_accumulator(self) -> Accumulator:
        return self._factory(**self._params)


class OpenSSLProvider(HashProvider):
    """
    Algorithms only reachable through hashlib.new().

    Availability depends on the OpenSSL build the interpreter is linked
    against, so support is probed once and cached.
    """

    def __init__(self, identity: Hash, openssl_name: str) -> None:
        self._identity = identity
        self._openssl_name = openssl_name
        self._supported: bool | None = None

    @property
    def identity(self) -> Hash:
        return self._identity

    def is_supported(self) -> bool:
        if self._supported is None:
            if self._openssl_name not in hashlib.algorithms_available:
                self._supported = False
            else:
                # Listed names can still be blocked, e.g. by FIPS mode
                try:
                    hashlib.new(self._openssl_name)
                    self._supported = True
                except ValueError:
                    self._supported = False
        return self._supported

    def create_accumulator(self) -> Accumulator:
        return hashlib.new(self._openssl_name)


class MD4Provider(HashProvider):
    """MD4 via pycryptodome - broken, kept for legacy interop only."""

    @property
    def identity(self) -> Hash:
        return Hash.MD4

    def create_accumulator(self) -> Accumulator:
        return MD4.new()


class RIPEMD160Provider(HashProvider):
    """RIPEMD-160 via pycryptodome, independent of the OpenSSL build."""

    @property
    def identity(self) -> Hash:
        return Hash.RIPEMD160

    def create_accumulator(self) -> Accumulator:
        return RIPEMD160.new()


class TruncatedSHA512Provider(HashProvider):
    """SHA-512/224 and SHA-512/256 via pycryptodome."""

    _TRUNCATIONS = {Hash.SHA512_224: "224", Hash.SHA512_256: "256"}

    def __init__(self, identity: Hash) -> None:
        if identity not in self._TRUNCATIONS:
            raise ValueError(f"Not a truncated SHA-512 identity: {identity.display_name}")
        self._identity = identity

    @property
    def identity(self) -> Hash:
        return self._identity

    def create_accumulator(self) -> Accumulator:
        return SHA512.new(truncate=self._TRUNCATIONS[self._identity])


class Blake3Provider(HashProvider):
    """BLAKE3 hashing - fast cryptographic hash, optional dependency."""

    @property
    def identity(self) -> Hash:
        return Hash.BLAKE3

    def is_supported(self) -> bool:
        return blake3 is not None

    def create_accumulator(self) -> Accumulator:
        if blake3 is None:
            raise ImportError("blake3 package not installed")
        return blake3.blake3()


class UnimplementedProvider(HashProvider):
    """An identity that is known but has no implementation of its own."""

    def __init__(self, identity: Hash) -> None:
        self._identity = identity

    @property
    def identity(self) -> Hash:
        return self._identity

    def is_supported(self) -> bool:
        return False

    def create_accumulator(self) -> Accumulator:
        raise NotImplementedError(f"{self._identity.display_name} has no implementation")
