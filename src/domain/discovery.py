"""
Federation discovery domain service.

Turns a remote email address into a cached, validated federation record
and drives the peer handshake against it.

Discovery flow
==============

    email -> domain
          -> cache.get(domain)
             hit:  stored records, no network access
             miss: registry.fetch_domain_info -> parser.parse
                   -> cache.set(domain, record) for each record
          -> first record validated (public key, SRV target)
          -> peer handshake against srv[0]

Only the first discovered record is attempted. Once a domain has cached
records the registry is never contacted again for it; there is no expiry.
Concurrent misses for the same domain may both reach the registry and
both write to the cache.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .exceptions import DiscoveryError, DiscoveryErrorKind, ValidationError, ValidationErrorKind
from .models import FederationRecord
from .parser import FederationResponseParser
from .ports import FederationCache, PeerHandshakeClient, RegistryClient

logger = logging.getLogger(__name__)


@dataclass
class FederationDiscoveryService:
    """
    Domain service for federation discovery.

    Orchestrates cache lookup, registry discovery, record validation
    and the peer handshake.
    """

    cache: FederationCache
    registry: RegistryClient
    parser: FederationResponseParser
    peer_client: PeerHandshakeClient

    async def resolve_remote_user_keys(self, email: str) -> Any:
        """
        Load the public keys of a remote user from their federation peer.

        Args:
            email: Remote user's email address

        Returns:
            The peer's response payload, unmodified

        Raises:
            ValidationError: Address has no domain, or the first discovered
                record lacks a public key or SRV target
            DiscoveryError: Registry or peer round trip failed, or the
                domain has no federation record
        """
        domain = self._domain_of(email)
        logger.info("prepare federation for %s", domain)

        records = await self.discover_federation(domain)
        if not records:
            logger.warning("No federation record available for %s", domain)
            raise DiscoveryError(DiscoveryErrorKind.NO_FEDERATION_RECORD)

        record = records[0]
        self._ensure_usable(record)

        target = record.srv[0].address
        logger.info("starting federation handshake with %s for %s", target, domain)
        return await self.peer_client.request_user_keys(record.public_key, email, domain, target)

    async def discover_federation(self, domain: str) -> list[FederationRecord]:
        """
        Return federation records for a domain, discovering them on a cache miss.

        Every freshly parsed record is written to the cache before the
        list is returned.
        """
        stored = await self.cache.get(domain)
        if stored:
            logger.debug("federation cache hit for %s (%d records)", domain, len(stored))
            return stored

        logger.info("federation cache miss for %s, asking registry", domain)
        raw_response = await self.registry.fetch_domain_info(domain)
        records = await self.parser.parse(raw_response)

        for record in records:
            await self.cache.set(domain, record)

        logger.info("discovered %d federation record(s) for %s", len(records), domain)
        return records

    def _domain_of(self, email: str) -> str:
        """Extract the domain part of an email address."""
        parts = email.split("@")
        if len(parts) < 2 or not parts[1]:
            logger.warning("Rejecting federation for address without domain")
            raise ValidationError(ValidationErrorKind.INVALID_EMAIL)
        return parts[1]

    def _ensure_usable(self, record: FederationRecord) -> None:
        if not record.public_key:
            logger.warning("Federation record for %s has no public key", record.domain)
            raise ValidationError(ValidationErrorKind.MISSING_PUBLIC_KEY)

        if not record.srv:
            logger.warning("Federation record for %s has no SRV target", record.domain)
            raise ValidationError(ValidationErrorKind.MISSING_SRV)
