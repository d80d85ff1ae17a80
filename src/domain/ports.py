"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Any, Protocol

from .models import EncryptedEnvelope, FederationRecord, SrvTarget


class FederationCache(Protocol):
    """Port interface for per-domain federation record storage."""

    async def get(self, domain: str) -> list[FederationRecord]:
        """
        Load records previously discovered for a domain.

        Returns:
            Records in insertion order, or an empty list if the domain
            has not been discovered yet
        """
        ...

    async def set(self, domain: str, record: FederationRecord) -> None:
        """
        Append one record under a domain.

        Implementations must give read-your-writes consistency within a
        process and tolerate duplicate writes for the same domain.
        """
        ...


class Encryptor(Protocol):
    """Port interface for the shared encryption and checksum capability."""

    def seal(self, public_key: str, body: dict[str, str]) -> EncryptedEnvelope:
        """
        Encrypt every value of body for the holder of public_key.

        Returns:
            Envelope with the encrypted payload and a checksum over it
        """
        ...

    def open(self, private_key: str, payload: dict[str, str]) -> dict[str, str]:
        """Decrypt a payload previously produced by seal()."""
        ...

    def checksum(self, payload: Any) -> str:
        """Compute the content checksum of a payload."""
        ...


class LicenseClient(Protocol):
    """Port interface for the license checksum collaborator."""

    async def get_checksum(self) -> str:
        """Return the checksum of this installation's license."""
        ...


class FederationConfigClient(Protocol):
    """Port interface for the federation configuration collaborator."""

    async def get_public_federation_service(self) -> str:
        """Return the registry host (no scheme)."""
        ...


class SrvResolver(Protocol):
    """Port interface for 2ndLock service record lookups."""

    async def resolve_service_record(self, domain: str) -> list[SrvTarget] | None:
        """
        Resolve _2ndlock._tcp.<domain>.

        Returns:
            SRV targets in resolver order, or None when the domain has
            no usable record. Never raises for DNS failures.
        """
        ...


class RegistryClient(Protocol):
    """Port interface for the public federation registry."""

    async def fetch_registry_public_key(self) -> str:
        """Fetch the registry's public key."""
        ...

    async def fetch_domain_info(self, domain: str) -> Any:
        """Run the encrypted domain lookup and return the raw response body."""
        ...


class PeerHandshakeClient(Protocol):
    """Port interface for the peer user-key handshake."""

    async def request_user_keys(
        self, peer_public_key: str, email: str, domain: str, target: str
    ) -> Any:
        """
        Send the encrypted user-key request to a peer.

        Args:
            peer_public_key: Federation public key of the peer
            email: Remote user address
            domain: Remote user domain
            target: Peer address in host:port form

        Returns:
            The peer's response payload, unmodified
        """
        ...


class FederationValidator(Protocol):
    """Port interface for validating inbound federation requests."""

    async def validate_incoming_federation_request(self, checksum: str, body: Any) -> None:
        """Raise ValidationError unless checksum matches body."""
        ...

    async def get_user_information(self, email: str, domain: str) -> dict[str, Any]:
        """Return this service's key material for a local user."""
        ...


class UserKeyDirectory(Protocol):
    """Port interface for looking up local users' public keys."""

    async def get_public_keys(self, email: str) -> list[str]:
        """Return all public keys registered for email (may be empty)."""
        ...
