"""Error hierarchy for mcuuid.

Error layers:
- MCUUIDError: Base class for all recoverable mcuuid errors
- DomainError: Identifier or username rejected (bad input, unknown player)
- InfrastructureError: Directory service unreachable or misbehaving, misconfiguration

VariantMismatchError sits outside the hierarchy on purpose: it signals a caller
bug (unwrapping the wrong variant), not a condition to recover from.
"""

import httpx


class MCUUIDError(Exception):
    """Base class for all mcuuid errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(MCUUIDError):
    """Base class for domain errors."""


class InvalidUuidError(DomainError):
    """UUID version does not match an enabled player mode, or text is not a UUID."""

    def __init__(self, message: str = "invalid uuid") -> None:
        super().__init__(message, code="invalid_uuid")


class InvalidUsernameError(DomainError):
    """The directory service has no player for the given username or UUID."""

    def __init__(self, message: str = "invalid username") -> None:
        super().__init__(message, code="invalid_username")


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(MCUUIDError):
    """Base class for infrastructure/system errors."""


class TransportError(InfrastructureError):
    """The HTTP exchange with the directory service could not complete."""

    def __init__(self, cause: httpx.RequestError | httpx.InvalidURL) -> None:
        super().__init__(f"transport error: {cause}", code="transport")
        self.cause = cause


class UnknownResponseError(InfrastructureError):
    """The directory service answered successfully with a body we cannot decode."""

    def __init__(self, message: str = "unknown") -> None:
        super().__init__(message, code="unknown")


class ConfigurationError(InfrastructureError):
    """No player mode enabled, or a disabled mode was requested."""


class VariantMismatchError(TypeError):
    """unwrap_online()/unwrap_offline() called on the other variant."""
