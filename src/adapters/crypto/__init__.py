"""Crypto adapters - Envelope encryption and inbound request validation."""

from .rsa import RsaEnvelopeEncryptor
from .validator import EnvelopeFederationValidator

__all__ = ["EnvelopeFederationValidator", "RsaEnvelopeEncryptor"]
