"""
DNS SRV resolver adapter - Implements SrvResolver protocol.

Looks up the 2ndLock federation service record of a domain with
dnspython's asyncio resolver. Domains without the record are normal,
so every DNS failure is reported as "no record" instead of raising.
"""

import logging

import dns.asyncresolver
import dns.exception
import dns.rdatatype

from src.domain.models import SrvTarget

logger = logging.getLogger(__name__)

SERVICE_PREFIX = "_2ndlock._tcp"


class DnsSrvResolver:
    """
    Implements SrvResolver protocol via dnspython.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Resolver timeouts are the platform defaults.
    """

    def __init__(self, resolver: dns.asyncresolver.Resolver | None = None) -> None:
        self._resolver = resolver or dns.asyncresolver.Resolver()

    async def resolve_service_record(self, domain: str) -> list[SrvTarget] | None:
        """
        Resolve _2ndlock._tcp.<domain>.

        Args:
            domain: Domain to look up

        Returns:
            SRV targets in the order the resolver returned them,
            or None on NXDOMAIN, empty answer, timeout or any other
            resolver error
        """
        query = f"{SERVICE_PREFIX}.{domain}"
        try:
            answer = await self._resolver.resolve(query, rdtype=dns.rdatatype.SRV)
        except (dns.exception.DNSException, OSError) as exc:
            logger.debug("DNS SRV lookup failed for %s: %s", query, exc.__class__.__name__)
            return None

        targets = [
            SrvTarget(
                name=str(rdata.target).rstrip("."),
                port=rdata.port,
                priority=rdata.priority,
                weight=rdata.weight,
            )
            for rdata in answer
        ]
        if not targets:
            return None

        logger.debug("DNS SRV for %s resolved to %d target(s)", query, len(targets))
        return targets
