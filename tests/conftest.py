"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- RSA key material for envelope encryption
- Federation records and SRV targets
- Fake SRV resolver for parser and flow tests
"""

from collections.abc import Callable

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from src.domain.models import FederationRecord, SrvTarget


class FakeSrvResolver:
    """SrvResolver stand-in answering from a dict and recording queries."""

    def __init__(self, answers: dict[str, list[SrvTarget] | None]) -> None:
        self.answers = answers
        self.queries: list[str] = []

    async def resolve_service_record(self, domain: str) -> list[SrvTarget] | None:
        self.queries.append(domain)
        return self.answers.get(domain)


@pytest.fixture(scope="session")
def key_pair() -> tuple[str, str]:
    """Generate an RSA key pair as (private_pem, public_pem)."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )
    return private_pem, public_pem


@pytest.fixture
def srv_target() -> SrvTarget:
    """SRV target of the example.com federation peer."""
    return SrvTarget(name="fed.example.com", port=5222, priority=10, weight=5)


@pytest.fixture
def make_record(srv_target: SrvTarget) -> Callable[..., FederationRecord]:
    """Factory for federation records with sensible defaults."""

    def _make(
        domain: str = "example.com",
        public_key: str = "PKX",
        srv: tuple[SrvTarget, ...] | None = None,
    ) -> FederationRecord:
        return FederationRecord(
            domain=domain,
            created="1700000000000",
            public_key=public_key,
            srv=(srv_target,) if srv is None else srv,
        )

    return _make


@pytest.fixture
def make_resolver() -> Callable[[dict[str, list[SrvTarget] | None]], FakeSrvResolver]:
    """Factory for fake SRV resolvers answering from a dict."""
    return FakeSrvResolver
