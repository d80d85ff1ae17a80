"""DNS adapters - Service record lookups."""

from .srv import DnsSrvResolver

__all__ = ["DnsSrvResolver"]
