"""
Custom exception hierarchy for hashreg.

Misuse of the registry (asking for a hash identity that does not exist, or for
one that has no constructor) raises a non-recoverable exception instead of
returning a sentinel value.
"""

from __future__ import annotations


class HashregException(Exception):
    """
    Base exception for all hashreg errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (identity values, names, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Registry Errors
# =============================================================================


class HashRegistryError(HashregException):
    """Base class for hash registry errors."""

    pass


class HashPreconditionError(HashRegistryError):
    """
    A hash identity outside the closed enumeration was used.

    Raised by register(), digest_size() and new(). This is a programming
    error in the caller, never a runtime condition worth retrying.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        identity: object = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["identity"] = identity
        super().__init__(message, context=ctx, cause=cause)
        self.identity = identity


class HashUnavailableError(HashRegistryError):
    """
    A known hash identity has no registered constructor.

    Callers that are unsure should probe with available() first.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        identity: int | None = None,
        name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if identity is not None:
            ctx["identity"] = identity
        if name:
            ctx["name"] = name
        super().__init__(message, context=ctx, cause=cause)
        self.identity = identity


class RegistryFrozenError(HashRegistryError):
    """Registration was attempted after the registry was frozen."""

    recoverable: bool = False


class DuplicateRegistrationError(HashRegistryError):
    """
    A second constructor was registered for the same identity.

    Only raised when the registry's duplicate policy is "reject".
    """

    def __init__(
        self,
        message: str,
        *,
        identity: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if identity is not None:
            ctx["identity"] = identity
        super().__init__(message, context=ctx, cause=cause)


class UnknownHashError(HashregException, ValueError):
    """
    A hash name could not be resolved to an identity.

    Inherits from ValueError so argument parsers treat it as bad input.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Configuration Errors
# =============================================================================


class HashregConfigError(HashregException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(HashregConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)
