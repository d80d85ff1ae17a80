"""
License adapters - Implement LicenseClient protocol.

The license checksum authenticates this installation against the
public federation registry (sent as X-Auth-Key).
"""

import logging

import httpx

logger = logging.getLogger(__name__)


class HttpLicenseClient:
    """
    Loads the license checksum from the internal license service.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Errors propagate to the caller, which owns the failure policy.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str, timeout_ms: int) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_ms / 1000

    async def get_checksum(self) -> str:
        response = await self._client.get(
            f"{self._base_url}/api/v1/license/checksum",
            timeout=self._timeout,
        )
        response.raise_for_status()
        checksum = response.json()["checksum"]
        logger.debug("Loaded license checksum from %s", self._base_url)
        return checksum


class StaticLicenseClient:
    """Serves a license checksum supplied by configuration."""

    def __init__(self, checksum: str) -> None:
        self._checksum = checksum

    async def get_checksum(self) -> str:
        return self._checksum
