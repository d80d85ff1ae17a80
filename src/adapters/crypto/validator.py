"""
Inbound federation validator - Implements FederationValidator protocol.

Peers address this service with bodies sealed for our federation key
and a checksum over the sealed payload. The checksum is compared in
constant time; user lookups open the sealed email/domain first when a
private key is configured.
"""

import logging
import secrets
from typing import Any

from src.domain.exceptions import ValidationError, ValidationErrorKind
from src.domain.ports import Encryptor, UserKeyDirectory

logger = logging.getLogger(__name__)


class EnvelopeFederationValidator:
    """
    Implements FederationValidator protocol with the shared Encryptor.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self, encryptor: Encryptor, directory: UserKeyDirectory, private_key: str = ""
    ) -> None:
        """
        Initialize validator.

        Args:
            encryptor: Shared encryption and checksum capability
            directory: Lookup of local users' public keys
            private_key: PEM private key; empty means email/domain arrive in clear
        """
        self._encryptor = encryptor
        self._directory = directory
        self._private_key = private_key

    async def validate_incoming_federation_request(self, checksum: str, body: Any) -> None:
        expected = self._encryptor.checksum(body)
        if not secrets.compare_digest(expected.encode(), (checksum or "").encode()):
            logger.warning("Rejecting federation request with mismatching checksum")
            raise ValidationError(ValidationErrorKind.CHECKSUM_MISMATCH)

    async def get_user_information(self, email: str, domain: str) -> dict[str, Any]:
        if self._private_key:
            try:
                opened = self._encryptor.open(self._private_key, {"email": email, "domain": domain})
            except Exception:
                logger.exception("Opening federation user request failed")
                raise ValidationError(ValidationErrorKind.UNREADABLE_REQUEST) from None
            email, domain = opened["email"], opened["domain"]

        keys = await self._directory.get_public_keys(email)
        logger.info("Serving %d public key(s) for federation request from %s", len(keys), domain)
        return {"email": email, "domain": domain, "publicKeys": keys}
