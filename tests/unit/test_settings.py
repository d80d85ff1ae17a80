"""
Unit tests for application settings and the settings-backed config client.
"""

import pytest

from src.adapters.configuration.settings import SettingsFederationConfigClient
from src.config.settings import FederationSettings, Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Federation defaults point at the public registry over https."""
        monkeypatch.delenv("FED_FLAG", raising=False)
        monkeypatch.delenv("FED_TIMEOUT", raising=False)
        settings = Settings(_env_file=None)

        assert settings.fed_flag == "https"
        assert settings.fed_timeout == 5000
        assert settings.federation.public_federation_service == "license.2ndlock.org"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Nested federation settings are read with a double underscore."""
        monkeypatch.setenv("FEDERATION__PUBLIC_FEDERATION_SERVICE", "registry.internal")
        monkeypatch.setenv("FED_TIMEOUT", "1500")
        monkeypatch.setenv("FED_FLAG", "http")

        settings = Settings(_env_file=None)

        assert settings.federation.public_federation_service == "registry.internal"
        assert settings.fed_timeout == 1500
        assert settings.fed_flag == "http"

    def test_rejects_unknown_scheme(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Only http and https are valid handshake schemes."""
        monkeypatch.setenv("FED_FLAG", "ftp")

        with pytest.raises(ValueError):
            Settings(_env_file=None)

    def test_user_public_keys_from_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Local user keys for the memory backend are read as JSON."""
        monkeypatch.setenv("USER_PUBLIC_KEYS", '{"bob@local.org": ["BOB-KEY"]}')

        settings = Settings(_env_file=None)

        assert settings.user_public_keys == {"bob@local.org": ["BOB-KEY"]}


class TestSettingsFederationConfigClient:
    """Tests for SettingsFederationConfigClient."""

    @pytest.mark.asyncio
    async def test_serves_registry_host(self) -> None:
        """The registry host comes from federation settings."""
        client = SettingsFederationConfigClient(
            FederationSettings(public_federation_service="registry.test")
        )

        assert await client.get_public_federation_service() == "registry.test"
