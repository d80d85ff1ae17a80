"""HTTP adapters - Registry, peer and license service clients."""

from .license import HttpLicenseClient, StaticLicenseClient
from .peer import HttpPeerHandshakeClient
from .registry import HttpRegistryClient

__all__ = [
    "HttpLicenseClient",
    "HttpPeerHandshakeClient",
    "HttpRegistryClient",
    "StaticLicenseClient",
]
