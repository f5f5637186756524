"""
Custom exception hierarchy for digestlib.

Every failure in the digest framework surfaces as a typed exception
carrying the algorithm or type it concerns. Each concrete error also
inherits from the builtin exception callers would naturally catch for
that situation (ImportError for a missing algorithm, TypeError for
misuse of a digest type, ValueError for missing input).
"""

from __future__ import annotations


class DigestException(Exception):
    """
    Base exception for all digestlib errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (algorithm, type name, etc.)
    """

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
# Configuration Errors
# =============================================================================


class DigestConfigError(DigestException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(DigestConfigError):
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


# =============================================================================
# Engine Errors
# =============================================================================


class AlgorithmUnavailable(DigestException, ImportError):
    """
    No provider furnishes the named algorithm.

    Raised when a digest type is registered for an algorithm that no
    provider can construct, and when engine construction fails for an
    instance. Inherits from ImportError so that importing an algorithm
    module on a machine without support behaves like any other
    unavailable optional module.
    """

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        self.algorithm = algorithm
        super().__init__(message, context=ctx, cause=cause)


class DuplicationFailure(DigestException, TypeError):
    """The engine backing a digest cannot be cloned."""

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        self.algorithm = algorithm
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Digest Type Errors
# =============================================================================


class DigestTypeError(DigestException, TypeError):
    """Base class for misuse of digest types."""

    def __init__(
        self,
        message: str,
        *,
        type_name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if type_name:
            ctx["type"] = type_name
        self.type_name = type_name
        super().__init__(message, context=ctx, cause=cause)


class AbstractTypeMisuse(DigestTypeError):
    """The abstract digest root was instantiated directly."""

    pass


class UnresolvedDescriptor(DigestTypeError):
    """No algorithm descriptor is attached to a digest type or its ancestors."""

    pass


class UnimplementedPrimitive(DigestException, NotImplementedError):
    """A digest type left a required primitive operation unimplemented."""

    def __init__(
        self,
        type_name: str,
        operation: str,
        *,
        context: dict | None = None,
    ) -> None:
        self.type_name = type_name
        self.operation = operation
        super().__init__(f"{type_name} does not implement {operation}()", context=context)


class EmptyInput(DigestException, ValueError):
    """A one-shot class-level digest was requested without data."""

    pass
