"""
PostgreSQL storage adapter - Implements UserStore protocol.

This module provides a PostgreSQL implementation of the domain's
storage port using psycopg3 with raw SQL. Records live in a key/value
table (see migrations/001_create_local_storage.sql) with one row per
key, so saving the user is an atomic upsert of a single row.
"""

import logging
from pathlib import Path

from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

logger = logging.getLogger(__name__)


class PostgresUserStore:
    """
    Implements UserStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool, key: str = "user") -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
            key: Row key the user record is stored under
        """
        self._pool = pool
        self._key = key

    def save_user(self, record: dict[str, str]) -> None:
        """
        Upsert the record under the configured key.

        Uses INSERT ... ON CONFLICT DO UPDATE so the previous record is
        replaced in one statement.
        """
        sql = """
            INSERT INTO local_storage (key, value, updated_at)
            VALUES (%s, %s, NOW())
            ON CONFLICT (key) DO UPDATE
            SET value = EXCLUDED.value,
                updated_at = NOW()
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (self._key, Jsonb(dict(record))))
            conn.commit()

        logger.info("Stored user record under key %r", self._key)

    def load_user(self) -> dict[str, str] | None:
        """Return the stored record, or None if the key has no row."""
        sql = "SELECT value FROM local_storage WHERE key = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (self._key,))
            row = cursor.fetchone()

        if row is None:
            return None
        return row[0]


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/storage/postgres.py -> migrations/
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

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
