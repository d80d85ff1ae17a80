"""
Unit tests for in-memory repository adapters.

Tests verify the in-memory cache and key directory honour the port
contracts: empty means undiscovered, set appends, reads see writes.
"""

import pytest

from src.adapters.repository.memory import InMemoryFederationCache, InMemoryUserKeyDirectory
from src.domain.ports import FederationCache, UserKeyDirectory


class TestInMemoryFederationCache:
    """Tests for InMemoryFederationCache."""

    def test_implements_federation_cache_protocol(self) -> None:
        """InMemoryFederationCache satisfies the FederationCache port."""

        def accepts_cache(c: FederationCache) -> None:
            pass

        accepts_cache(InMemoryFederationCache())
        assert InMemoryFederationCache.__bases__ == (object,)

    @pytest.mark.asyncio
    async def test_unknown_domain_is_empty(self) -> None:
        """A domain never written reads as an empty list."""
        assert await InMemoryFederationCache().get("example.com") == []

    @pytest.mark.asyncio
    async def test_set_appends_in_order(self, make_record) -> None:
        """Records are appended under the domain in write order."""
        cache = InMemoryFederationCache()
        first, second = make_record(public_key="PK1"), make_record(public_key="PK2")

        await cache.set("example.com", first)
        await cache.set("example.com", second)

        assert await cache.get("example.com") == [first, second]

    @pytest.mark.asyncio
    async def test_duplicate_writes_tolerated(self, make_record) -> None:
        """Writing the same record twice keeps both entries."""
        cache = InMemoryFederationCache()
        record = make_record()

        await cache.set("example.com", record)
        await cache.set("example.com", record)

        assert len(await cache.get("example.com")) == 2

    @pytest.mark.asyncio
    async def test_domains_are_isolated(self, make_record) -> None:
        """Entries are keyed by domain."""
        cache = InMemoryFederationCache()
        await cache.set("example.com", make_record())

        assert await cache.get("other.org") == []

    @pytest.mark.asyncio
    async def test_get_returns_copy(self, make_record) -> None:
        """Mutating a returned list does not change the cache."""
        cache = InMemoryFederationCache()
        await cache.set("example.com", make_record())

        (await cache.get("example.com")).clear()

        assert len(await cache.get("example.com")) == 1


class TestInMemoryUserKeyDirectory:
    """Tests for InMemoryUserKeyDirectory."""

    def test_implements_user_key_directory_protocol(self) -> None:
        """InMemoryUserKeyDirectory satisfies the UserKeyDirectory port."""

        def accepts_directory(d: UserKeyDirectory) -> None:
            pass

        accepts_directory(InMemoryUserKeyDirectory())

    @pytest.mark.asyncio
    async def test_lookup_is_case_insensitive(self) -> None:
        """Email lookups are normalized."""
        directory = InMemoryUserKeyDirectory({"Bob@Local.org": ["K1"]})
        directory.add("bob@local.org", "K2")

        assert await directory.get_public_keys("  BOB@local.ORG ") == ["K1", "K2"]
