"""
Domain exceptions - Semantic error types for federation.

This module defines domain-specific exceptions that communicate
federation failures without leaking infrastructure details. Every
error carries a kind and a fixed, caller-safe message; the underlying
cause is logged where it happens and never attached to the message.
"""

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Reasons a discovered record or inbound request is rejected."""

    MISSING_PUBLIC_KEY = "missing-public-key"
    MISSING_SRV = "missing-srv"
    INVALID_EMAIL = "invalid-email"
    CHECKSUM_MISMATCH = "checksum-mismatch"
    UNREADABLE_REQUEST = "unreadable-request"


class DiscoveryErrorKind(str, Enum):
    """Reasons a discovery or handshake round trip failed."""

    REGISTRY_KEY_UNAVAILABLE = "registry-key-unavailable"
    REGISTRY_LOOKUP_FAILED = "registry-lookup-failed"
    PEER_HANDSHAKE_FAILED = "peer-handshake-failed"
    NO_FEDERATION_RECORD = "no-federation-record"


_MESSAGES = {
    ValidationErrorKind.MISSING_PUBLIC_KEY: (
        "federation not possible due missing public key from recipient service"
    ),
    ValidationErrorKind.MISSING_SRV: (
        "federation not possible due missing dns srv entry for 2ndLock in target domain"
    ),
    ValidationErrorKind.INVALID_EMAIL: "federation not possible due invalid email address",
    ValidationErrorKind.CHECKSUM_MISMATCH: "federation request checksum does not match body",
    ValidationErrorKind.UNREADABLE_REQUEST: "federation request could not be decrypted",
    DiscoveryErrorKind.REGISTRY_KEY_UNAVAILABLE: (
        "can't load public key from public federation service"
    ),
    DiscoveryErrorKind.REGISTRY_LOOKUP_FAILED: (
        "can't load domain information from public federation service"
    ),
    DiscoveryErrorKind.PEER_HANDSHAKE_FAILED: "Federation request to target service failed",
    DiscoveryErrorKind.NO_FEDERATION_RECORD: "no federation record found for target domain",
}


class FederationError(Exception):
    """Base class for federation domain errors."""

    def __init__(self, kind: ValidationErrorKind | DiscoveryErrorKind) -> None:
        self.kind = kind
        self.message = _MESSAGES[kind]
        super().__init__(self.message)


class ValidationError(FederationError):
    """Discovered record or inbound request is not usable."""

    pass


class DiscoveryError(FederationError):
    """Registry or peer round trip failed."""

    pass
