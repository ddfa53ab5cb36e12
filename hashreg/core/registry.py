"""
Hash identity registry.

Holds the table of accumulator constructors, one slot per hash identity.
Providers fill the table during a registration phase at startup; after
freeze() the table is read-only and may be shared between threads without
locking.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from typing import Literal

from .exceptions import (
    DuplicateRegistrationError,
    HashPreconditionError,
    HashUnavailableError,
    RegistryFrozenError,
)
from .identity import DIGEST_SIZES, MAX_HASH, Hash, display_name, to_identity
from .interfaces.accumulator import Accumulator
from .interfaces.logger import ILogger

Constructor = Callable[[], Accumulator]
DuplicatePolicy = Literal["replace", "reject"]


class HashRegistry:
    """
    Registry mapping hash identities to accumulator constructors.

    Example:
        registry = HashRegistry()
        registry.register(Hash.SHA256, hashlib.sha256)
        registry.freeze()

        if registry.available(Hash.SHA256):
            h = registry.new(Hash.SHA256)
            h.update(b"data")
            h.digest()
    """

    def __init__(
        self,
        duplicates: DuplicatePolicy = "replace",
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize an empty registry.

        Args:
            duplicates: "replace" lets a later registration win (logged as a
                warning), "reject" raises DuplicateRegistrationError
            logger: Diagnostic logger, defaults to NullLogger
        """
        if duplicates not in ("replace", "reject"):
            raise ValueError(f"Invalid duplicate policy: {duplicates}")
        if logger is None:
            from ..services.logging import NullLogger

            logger = NullLogger()

        self._constructors: list[Constructor | None] = [None] * MAX_HASH
        self._registered: set[Hash] = set()
        self._duplicates = duplicates
        self._logger = logger
        self._lock = threading.Lock()
        self._frozen = False

    def register(self, identity: int, constructor: Constructor | None) -> None:
        """
        Register a constructor for a hash identity.

        Passing None records the identity as known but unavailable.

        Args:
            identity: Hash identity, 0 < identity < MAX_HASH
            constructor: Zero-argument factory returning a fresh accumulator

        Raises:
            HashPreconditionError: If identity is not in the enumeration
            RegistryFrozenError: If freeze() has been called
            DuplicateRegistrationError: Under the "reject" policy, if the
                identity was already registered
        """
        h = to_identity(identity)
        if h is None:
            self._logger.error("Register of unknown hash function %r", identity)
            raise HashPreconditionError("Register of unknown hash function", identity=identity)

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Registry is frozen; cannot register {h.display_name}",
                    context={"identity": int(h)},
                )
            if h in self._registered:
                if self._duplicates == "reject":
                    raise DuplicateRegistrationError(
                        f"{h.display_name} is already registered", identity=int(h)
                    )
                self._logger.warning("Replacing registered constructor for %s", h.display_name)

            self._constructors[h] = constructor
            self._registered.add(h)

        if constructor is None:
            self._logger.debug("Registered %s as unavailable", h.display_name)
        else:
            self._logger.debug("Registered %s", h.display_name)

    def freeze(self) -> None:
        """End the registration phase. Later register() calls raise."""
        with self._lock:
            self._frozen = True
        self._logger.debug("Hash registry frozen with %d available", len(self.available_identities))

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def digest_size(self, identity: int) -> int:
        """
        Return the digest length in bytes for the given identity.

        Does not require a constructor to be registered.

        Raises:
            HashPreconditionError: If identity is not in the enumeration
        """
        h = to_identity(identity)
        if h is None:
            self._logger.error("Size of unknown hash function %r", identity)
            raise HashPreconditionError("Size of unknown hash function", identity=identity)
        return DIGEST_SIZES[h]

    def available(self, identity: object) -> bool:
        """Report whether a constructor is registered. Never raises."""
        h = to_identity(identity)
        return h is not None and self._constructors[h] is not None

    def new(self, identity: int) -> Accumulator:
        """
        Return a fresh accumulator for the given identity.

        Raises:
            HashPreconditionError: If identity is not in the enumeration
            HashUnavailableError: If no constructor is registered
        """
        h = to_identity(identity)
        if h is None:
            self._logger.error("Requested hash function %r is unknown", identity)
            raise HashPreconditionError(
                f"Requested hash function #{identity} is unknown", identity=identity
            )

        constructor = self._constructors[h]
        if constructor is None:
            self._logger.error("Requested hash function %s is unavailable", h.display_name)
            raise HashUnavailableError(
                f"Requested hash function #{int(h)} is unavailable",
                identity=int(h),
                name=h.display_name,
            )
        return constructor()

    def display_name(self, identity: object) -> str:
        """Human-readable name for any value. Never raises."""
        return display_name(identity)

    def compute_digest(self, identity: int, data: bytes) -> bytes:
        """
        Hash data in one shot.

        Args:
            identity: Hash identity
            data: Data to hash

        Returns:
            Raw digest bytes
        """
        accumulator = self.new(identity)
        accumulator.update(data)
        return accumulator.digest()

    def compute_hash(self, identity: int, data: bytes) -> str:
        """Hash data in one shot and return the hex digest."""
        return self.compute_digest(identity, data).hex()

    @property
    def available_identities(self) -> list[Hash]:
        """Identities with a registered constructor, in ascending order."""
        return [h for h in Hash if self._constructors[h] is not None]

    def __contains__(self, identity: object) -> bool:
        return self.available(identity)

    def __iter__(self) -> Iterator[Hash]:
        return iter(self.available_identities)
