"""Repository adapters - Federation cache and user key storage."""

from .memory import InMemoryFederationCache, InMemoryUserKeyDirectory
from .postgres import PostgresFederationCache, PostgresUserKeyDirectory, run_migrations

__all__ = [
    "InMemoryFederationCache",
    "InMemoryUserKeyDirectory",
    "PostgresFederationCache",
    "PostgresUserKeyDirectory",
    "run_migrations",
]
