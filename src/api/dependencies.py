"""
FastAPI dependencies - Dependency injection factories.

This module is the composition root: it provides Depends() factories
that wire the domain service to its infrastructure adapters. Process
wide adapters (HTTP client, cache, registry client) are created during
app lifespan startup and stored in app.state.
"""

import httpx
from fastapi import Depends, Request

from src.adapters.configuration.settings import SettingsFederationConfigClient
from src.adapters.crypto.rsa import RsaEnvelopeEncryptor
from src.adapters.crypto.validator import EnvelopeFederationValidator
from src.adapters.dns.srv import DnsSrvResolver
from src.adapters.http.license import HttpLicenseClient, StaticLicenseClient
from src.adapters.http.peer import HttpPeerHandshakeClient
from src.adapters.http.registry import HttpRegistryClient
from src.config.settings import Settings, get_settings
from src.domain.discovery import FederationDiscoveryService
from src.domain.parser import FederationResponseParser
from src.domain.ports import (
    Encryptor,
    FederationCache,
    FederationValidator,
    RegistryClient,
    UserKeyDirectory,
)

# Module-level singletons - both adapters are stateless
_encryptor = RsaEnvelopeEncryptor()
_srv_resolver = DnsSrvResolver()


def build_registry_client(client: httpx.AsyncClient, settings: Settings) -> HttpRegistryClient:
    """
    Create the process-wide registry client.

    A configured license checksum is served directly; otherwise it is
    loaded from the license service on first use.
    """
    if settings.license_checksum:
        license_client = StaticLicenseClient(settings.license_checksum)
    else:
        license_client = HttpLicenseClient(
            client, settings.license_service_url, settings.fed_timeout
        )

    return HttpRegistryClient(
        client=client,
        license_client=license_client,
        config_client=SettingsFederationConfigClient(settings.federation),
        encryptor=_encryptor,
        timeout_ms=settings.fed_timeout,
    )


def get_encryptor() -> Encryptor:
    """Get the envelope encryptor (singleton)."""
    return _encryptor


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the shared HTTP client from app state."""
    return request.app.state.http_client


def get_cache(request: Request) -> FederationCache:
    """Get the federation cache from app state."""
    return request.app.state.cache


def get_registry_client(request: Request) -> RegistryClient:
    """Get the process-wide registry client from app state."""
    return request.app.state.registry_client


def get_user_key_directory(request: Request) -> UserKeyDirectory:
    """Get the local user key directory from app state."""
    return request.app.state.user_key_directory


def get_discovery_service(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> FederationDiscoveryService:
    """
    Create federation discovery service with injected dependencies.

    Wires together cache, registry client, response parser and peer
    handshake client for the domain service.
    """
    peer_client = HttpPeerHandshakeClient(
        client=get_http_client(request),
        encryptor=get_encryptor(),
        scheme=settings.fed_flag,
        timeout_ms=settings.fed_timeout,
    )
    return FederationDiscoveryService(
        cache=get_cache(request),
        registry=get_registry_client(request),
        parser=FederationResponseParser(resolver=_srv_resolver),
        peer_client=peer_client,
    )


def get_federation_validator(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> FederationValidator:
    """Create inbound federation validator with injected dependencies."""
    return EnvelopeFederationValidator(
        encryptor=get_encryptor(),
        directory=get_user_key_directory(request),
        private_key=settings.federation.private_key.get_secret_value(),
    )
