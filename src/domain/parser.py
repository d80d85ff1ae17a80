"""
Registry response parser.

Turns the registry's nested lookup response into FederationRecords,
attaching the SRV targets of each advertised domain. The registry
answers with an outer sequence of groups; each group maps (or lists)
entries of the form ``{"domain": ..., "publicKey": ...}``.

Bootstrap case: the community domain has no SRV record of its own and
is served from the root zone, so its targets come from 2ndlock.org.
"""

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from .models import FederationRecord
from .ports import SrvResolver

logger = logging.getLogger(__name__)

BOOTSTRAP_DOMAIN = "community.2ndlock.org"
ROOT_DOMAIN = "2ndlock.org"


def epoch_millis() -> str:
    """Current time as string-encoded epoch milliseconds."""
    return str(int(time.time() * 1000))


def _children(node: Any) -> Iterable[Any]:
    if isinstance(node, dict):
        return node.values()
    if isinstance(node, list | tuple):
        return node
    return ()


@dataclass
class FederationResponseParser:
    """Builds FederationRecords from a raw registry response."""

    resolver: SrvResolver
    clock: Callable[[], str] = field(default=epoch_millis)

    async def parse(self, raw_response: Any) -> list[FederationRecord]:
        """
        Parse a registry response.

        Entries whose SRV lookup yields nothing are dropped without
        aborting the rest. Output follows input traversal order and is
        not deduplicated.
        """
        records: list[FederationRecord] = []
        for group in _children(raw_response):
            for entry in _children(group):
                if not isinstance(entry, dict) or not entry.get("domain"):
                    logger.warning("Skipping malformed registry entry")
                    continue

                domain = entry["domain"]
                lookup_domain = ROOT_DOMAIN if domain == BOOTSTRAP_DOMAIN else domain

                srv = await self.resolver.resolve_service_record(lookup_domain)
                if srv is None:
                    logger.info("No 2ndLock service record for %s, dropping candidate", domain)
                    continue

                records.append(
                    FederationRecord(
                        domain=domain,
                        created=self.clock(),
                        public_key=entry.get("publicKey") or "",
                        srv=tuple(srv),
                    )
                )

        return records
