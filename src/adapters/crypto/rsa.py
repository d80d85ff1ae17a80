"""
RSA envelope encryptor - Implements Encryptor protocol.

Each value of a request body is encrypted separately with RSA-OAEP
(SHA-256) and base64 encoded, so the body keeps its field names on the
wire. The checksum is the SHA-256 hex digest of the canonical JSON form
of the sealed payload (sorted keys, no whitespace).
"""

import base64
import hashlib
import json
from typing import Any

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding

from src.domain.models import EncryptedEnvelope

_OAEP = padding.OAEP(
    mgf=padding.MGF1(algorithm=hashes.SHA256()),
    algorithm=hashes.SHA256(),
    label=None,
)


class RsaEnvelopeEncryptor:
    """
    Implements Encryptor protocol via the cryptography library.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Keys are PEM strings.
    """

    def seal(self, public_key: str, body: dict[str, str]) -> EncryptedEnvelope:
        key = serialization.load_pem_public_key(public_key.encode())
        payload = {
            name: base64.b64encode(key.encrypt(str(value).encode(), _OAEP)).decode()
            for name, value in body.items()
        }
        return EncryptedEnvelope(payload=payload, checksum=self.checksum(payload))

    def open(self, private_key: str, payload: dict[str, str]) -> dict[str, str]:
        key = serialization.load_pem_private_key(private_key.encode(), password=None)
        return {
            name: key.decrypt(base64.b64decode(value), _OAEP).decode()
            for name, value in payload.items()
        }

    def checksum(self, payload: Any) -> str:
        canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode()).hexdigest()
