"""
PostgreSQL repository adapters - FederationCache and UserKeyDirectory.

This module provides PostgreSQL implementations of the domain's cache
and user key ports using psycopg3's async pool with raw SQL.

Federation records are append-only rows; the identity column keeps
the insertion order that get() returns. Duplicate writes for the same
domain (concurrent cache misses) are stored as-is.
"""

import logging
from pathlib import Path

from psycopg.types.json import Jsonb
from psycopg_pool import AsyncConnectionPool

from src.domain.models import FederationRecord

logger = logging.getLogger(__name__)


class PostgresFederationCache:
    """
    Implements FederationCache protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize cache with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def get(self, domain: str) -> list[FederationRecord]:
        sql = """
            SELECT domain, created, publickey, srv
            FROM federation_records
            WHERE domain = %s
            ORDER BY id
        """

        async with self._pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute(sql, (domain,))
            rows = await cursor.fetchall()

        return [
            FederationRecord.from_dict(
                {"domain": row[0], "created": row[1], "publickey": row[2], "srv": row[3]}
            )
            for row in rows
        ]

    async def set(self, domain: str, record: FederationRecord) -> None:
        sql = """
            INSERT INTO federation_records (domain, created, publickey, srv)
            VALUES (%s, %s, %s, %s)
        """

        srv = [target.to_dict() for target in record.srv]
        async with self._pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute(sql, (domain, record.created, record.public_key, Jsonb(srv)))
            await conn.commit()


class PostgresUserKeyDirectory:
    """Implements UserKeyDirectory protocol via psycopg3."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def get_public_keys(self, email: str) -> list[str]:
        sql = """
            SELECT public_key FROM user_public_keys
            WHERE email = %s
            ORDER BY id
        """

        async with self._pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute(sql, (email.strip().lower(),))
            rows = await cursor.fetchall()
        return [row[0] for row in rows]


async def run_migrations(pool: AsyncConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 AsyncConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            async with pool.connection() as conn:
                await conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
