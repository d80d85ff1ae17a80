"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core logic for 2ndLock domain federation:
discovery of federation peers through the public registry, the caching
policy for discovered records, and the peer handshake flow. It defines
its own port interfaces for infrastructure abstraction, ensuring true
hexagonal architecture decoupling.
"""

from .discovery import FederationDiscoveryService
from .exceptions import (
    DiscoveryError,
    DiscoveryErrorKind,
    FederationError,
    ValidationError,
    ValidationErrorKind,
)
from .models import EncryptedEnvelope, FederationRecord, SrvTarget
from .parser import BOOTSTRAP_DOMAIN, ROOT_DOMAIN, FederationResponseParser
from .ports import (
    Encryptor,
    FederationCache,
    FederationConfigClient,
    FederationValidator,
    LicenseClient,
    PeerHandshakeClient,
    RegistryClient,
    SrvResolver,
    UserKeyDirectory,
)

__all__ = [
    "BOOTSTRAP_DOMAIN",
    "DiscoveryError",
    "DiscoveryErrorKind",
    "EncryptedEnvelope",
    "Encryptor",
    "FederationCache",
    "FederationConfigClient",
    "FederationDiscoveryService",
    "FederationError",
    "FederationRecord",
    "FederationResponseParser",
    "FederationValidator",
    "LicenseClient",
    "PeerHandshakeClient",
    "ROOT_DOMAIN",
    "RegistryClient",
    "SrvResolver",
    "SrvTarget",
    "UserKeyDirectory",
    "ValidationError",
    "ValidationErrorKind",
]
