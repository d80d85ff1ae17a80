"""
Settings-backed configuration adapter - Implements FederationConfigClient.

Serves the registry host from application settings. Point
FEDERATION__PUBLIC_FEDERATION_SERVICE at your own registry to run a
private key/license service.
"""

from src.config.settings import FederationSettings


class SettingsFederationConfigClient:
    """
    Implements FederationConfigClient protocol from FederationSettings.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, settings: FederationSettings) -> None:
        self._settings = settings

    async def get_public_federation_service(self) -> str:
        return self._settings.public_federation_service
