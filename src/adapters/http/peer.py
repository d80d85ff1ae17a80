"""
Peer handshake adapter - Implements PeerHandshakeClient protocol.

Sends the encrypted user-key request straight to a discovered peer:

    POST <scheme>://<host:port>/api/v1/federation/user   X-Federation-Checksum
"""

import logging
from typing import Any

import httpx

from src.domain.exceptions import DiscoveryError, DiscoveryErrorKind
from src.domain.ports import Encryptor

logger = logging.getLogger(__name__)


class HttpPeerHandshakeClient:
    """
    Implements PeerHandshakeClient protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        encryptor: Encryptor,
        scheme: str,
        timeout_ms: int,
    ) -> None:
        self._client = client
        self._encryptor = encryptor
        self._scheme = scheme
        self._timeout = timeout_ms / 1000

    async def request_user_keys(
        self, peer_public_key: str, email: str, domain: str, target: str
    ) -> Any:
        """
        Request a remote user's public keys from their federation peer.

        Args:
            peer_public_key: Federation public key of the peer
            email: Remote user address
            domain: Remote user domain
            target: Peer address in host:port form

        Returns:
            The peer's response body, unmodified: decoded JSON when the
            peer answers with a JSON content type, raw text otherwise

        Raises:
            DiscoveryError: PEER_HANDSHAKE_FAILED on any failure
        """
        try:
            envelope = self._encryptor.seal(
                peer_public_key,
                {"encryptedEmail": email, "encryptedDomain": domain},
            )
            response = await self._client.post(
                f"{self._scheme}://{target}/api/v1/federation/user",
                json=envelope.payload,
                headers={
                    "X-Federation-Checksum": envelope.checksum,
                    "Content-Type": "application/json",
                },
                timeout=self._timeout,
            )
            response.raise_for_status()
            if "json" in response.headers.get("content-type", ""):
                return response.json()
            return response.text
        except Exception:
            logger.exception("Federation request to %s failed", target)
            raise DiscoveryError(DiscoveryErrorKind.PEER_HANDSHAKE_FAILED) from None
