"""
Unit tests for PostgresFederationCache row mapping.

The pool is mocked, so no database is needed. Round trips against a
real PostgreSQL live in tests/integration/test_postgres_repository.py.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.adapters.repository.postgres import PostgresFederationCache
from src.domain.models import FederationRecord, SrvTarget


def build_pool(rows: list[tuple]) -> tuple[MagicMock, MagicMock]:
    """Create a mocked pool whose cursor returns the given rows."""
    cursor = MagicMock()
    cursor.execute = AsyncMock()
    cursor.fetchall = AsyncMock(return_value=rows)

    conn = MagicMock()
    conn.cursor.return_value.__aenter__.return_value = cursor
    conn.commit = AsyncMock()

    pool = MagicMock()
    pool.connection.return_value.__aenter__.return_value = conn
    return pool, cursor


class TestPostgresFederationCacheGet:
    """Tests for PostgresFederationCache.get."""

    @pytest.mark.asyncio
    async def test_rows_load_as_records(self) -> None:
        """Stored rows use the same shape as FederationRecord.to_dict."""
        srv = [{"name": "fed.example.com", "port": 5222, "priority": 10, "weight": 5}]
        pool, cursor = build_pool([("example.com", "1700000000000", "PKX", srv)])

        records = await PostgresFederationCache(pool).get("example.com")

        assert records == [
            FederationRecord(
                domain="example.com",
                created="1700000000000",
                public_key="PKX",
                srv=(SrvTarget(name="fed.example.com", port=5222, priority=10, weight=5),),
            )
        ]
        assert cursor.execute.await_args.args[1] == ("example.com",)

    @pytest.mark.asyncio
    async def test_null_columns_load_as_unusable_record(self) -> None:
        """Missing key and SRV columns read back as empty values."""
        pool, _ = build_pool([("example.com", "1700000000000", None, None)])

        (record,) = await PostgresFederationCache(pool).get("example.com")

        assert record.public_key == ""
        assert record.srv == ()
        assert not record.is_usable
