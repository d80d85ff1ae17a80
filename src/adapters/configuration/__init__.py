"""Configuration adapters - Federation configuration sources."""

from .settings import SettingsFederationConfigClient

__all__ = ["SettingsFederationConfigClient"]
