"""Tests for the error hierarchy."""

import httpx

from mcuuid.domain.shared.error import (
    ConfigurationError,
    DomainError,
    InfrastructureError,
    InvalidUsernameError,
    InvalidUuidError,
    MCUUIDError,
    TransportError,
    UnknownResponseError,
    VariantMismatchError,
)


class TestErrorHierarchy:
    def test_domain_errors(self):
        assert issubclass(InvalidUuidError, DomainError)
        assert issubclass(InvalidUsernameError, DomainError)

    def test_infrastructure_errors(self):
        for cls in (TransportError, UnknownResponseError, ConfigurationError):
            assert issubclass(cls, InfrastructureError)

    def test_variant_mismatch_is_not_recoverable(self):
        assert issubclass(VariantMismatchError, TypeError)
        assert not issubclass(VariantMismatchError, MCUUIDError)

    def test_codes(self):
        assert InvalidUuidError().code == "invalid_uuid"
        assert InvalidUsernameError().code == "invalid_username"
        assert UnknownResponseError().code == "unknown"
        assert ConfigurationError("boom").code == "ConfigurationError"

    def test_transport_error_keeps_cause(self):
        cause = httpx.ConnectError("refused")

        error = TransportError(cause)

        assert error.cause is cause
        assert error.code == "transport"
        assert "refused" in error.message
