"""
Registry client adapter - Implements RegistryClient protocol.

Talks to the public 2ndLock federation registry over HTTPS using httpx:

    GET  https://<registry>/api/v1/publickey    X-Auth-Key
    POST https://<registry>/api/v1/federation   X-Auth-Key, X-Auth-Checksum

The license checksum and registry host are loaded once per client
instance and reused for every later call. Concurrent first calls may
both load them; the values are identical so the last write is harmless.
"""

import logging
from typing import Any

import httpx

from src.domain.exceptions import DiscoveryError, DiscoveryErrorKind
from src.domain.ports import Encryptor, FederationConfigClient, LicenseClient

logger = logging.getLogger(__name__)


class HttpRegistryClient:
    """
    Implements RegistryClient protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        license_client: LicenseClient,
        config_client: FederationConfigClient,
        encryptor: Encryptor,
        timeout_ms: int,
    ) -> None:
        """
        Initialize registry client.

        Args:
            client: Shared httpx AsyncClient
            license_client: Source of the license checksum (X-Auth-Key)
            config_client: Source of the registry host
            encryptor: Seals the lookup request for the registry key
            timeout_ms: Per-call timeout in milliseconds
        """
        self._client = client
        self._license_client = license_client
        self._config_client = config_client
        self._encryptor = encryptor
        self._timeout = timeout_ms / 1000

        self._license_checksum: str | None = None
        self._registry_host: str | None = None

    async def fetch_registry_public_key(self) -> str:
        """
        Load the registry's public key.

        Raises:
            DiscoveryError: REGISTRY_KEY_UNAVAILABLE on any failure
        """
        try:
            host = await self._load_registry_host()
            response = await self._client.get(
                f"https://{host}/api/v1/publickey",
                headers=await self._auth_headers(),
                timeout=self._timeout,
            )
            response.raise_for_status()
            public_key = response.json()["publickey"]
        except Exception:
            logger.exception("Loading public key from public federation service failed")
            raise DiscoveryError(DiscoveryErrorKind.REGISTRY_KEY_UNAVAILABLE) from None

        return public_key

    async def fetch_domain_info(self, domain: str) -> Any:
        """
        Ask the registry which peers host federation for a domain.

        The request body is sealed with the registry key and sent with a
        checksum over the sealed payload.

        Raises:
            DiscoveryError: REGISTRY_KEY_UNAVAILABLE if the registry key
                cannot be loaded, REGISTRY_LOOKUP_FAILED on any other failure
        """
        public_key = await self.fetch_registry_public_key()

        try:
            host = await self._load_registry_host()
            envelope = self._encryptor.seal(public_key, {"domain": domain})
            headers = await self._auth_headers()
            headers["X-Auth-Checksum"] = envelope.checksum

            response = await self._client.post(
                f"https://{host}/api/v1/federation",
                json=envelope.payload,
                headers=headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
            return response.json()
        except Exception:
            logger.exception(
                "Loading domain information for %s from public federation service failed", domain
            )
            raise DiscoveryError(DiscoveryErrorKind.REGISTRY_LOOKUP_FAILED) from None

    async def _auth_headers(self) -> dict[str, str]:
        checksum = await self._load_license_checksum()
        return {
            "Content-Type": "application/json",
            "X-Auth-Key": checksum,
        }

    async def _load_license_checksum(self) -> str:
        if not self._license_checksum:
            self._license_checksum = await self._license_client.get_checksum()
        return self._license_checksum

    async def _load_registry_host(self) -> str:
        if not self._registry_host:
            self._registry_host = await self._config_client.get_public_federation_service()
        return self._registry_host
