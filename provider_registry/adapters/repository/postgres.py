"""
PostgreSQL repository adapter - Implements RegistryStore protocol.

This module provides the PostgreSQL implementation of the domain's
storage port using psycopg3 with raw SQL.

Serialization of the registry maps:
-----------------------------------
- registry_meta:        single row holding provider_count
- providers:            provider_id -> provider record (status as 1/2/3)
- principal_providers:  principal -> provider_id (principal is the primary key)
- verifiers:            verifier principal set

ID Assignment:
--------------
claim_principal locks the registry_meta row with SELECT FOR UPDATE before
checking the principal and assigning provider_count + 1. Concurrent
registrations (from this or any other process) therefore queue on that
row, which keeps IDs dense and never reused. A database sequence is not
used because a rolled-back insert would burn a value.
"""

import logging
from importlib import resources

from psycopg_pool import ConnectionPool

from provider_registry.domain.ports import Provider, VerificationStatus

logger = logging.getLogger(__name__)


class PostgresRegistryStore:
    """
    Implements RegistryStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def claim_principal(self, principal: str, name: str, credentials: str) -> int | None:
        """
        Atomically register a provider for a principal.

        Runs in one transaction holding the registry_meta row lock:
        check the principal, insert the provider and the mapping, advance
        provider_count. Nothing is written when the principal is taken.

        Returns:
            New provider id, or None if the principal already owns a provider
        """
        lock_sql = "SELECT provider_count FROM registry_meta WHERE id = 1 FOR UPDATE"
        exists_sql = "SELECT 1 FROM principal_providers WHERE principal = %s"
        insert_provider_sql = """
            INSERT INTO providers (id, name, credentials, background_check_passed, verification_status)
            VALUES (%s, %s, %s, FALSE, %s)
        """
        insert_mapping_sql = """
            INSERT INTO principal_providers (principal, provider_id)
            VALUES (%s, %s)
        """
        bump_sql = "UPDATE registry_meta SET provider_count = %s WHERE id = 1"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(lock_sql)
            (provider_count,) = cursor.fetchone()

            cursor.execute(exists_sql, (principal,))
            if cursor.fetchone() is not None:
                conn.commit()
                return None

            provider_id = provider_count + 1
            cursor.execute(
                insert_provider_sql,
                (provider_id, name, credentials, VerificationStatus.PENDING.value),
            )
            cursor.execute(insert_mapping_sql, (principal, provider_id))
            cursor.execute(bump_sql, (provider_id,))
            conn.commit()
            return provider_id

    def add_verifier(self, principal: str) -> None:
        sql = """
            INSERT INTO verifiers (principal)
            VALUES (%s)
            ON CONFLICT (principal) DO NOTHING
        """
        with self._pool.connection() as conn:
            conn.execute(sql, (principal,))
            conn.commit()

    def is_verifier(self, principal: str) -> bool:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT 1 FROM verifiers WHERE principal = %s", (principal,))
            return cursor.fetchone() is not None

    def list_verifiers(self) -> frozenset[str]:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT principal FROM verifiers")
            return frozenset(row[0] for row in cursor.fetchall())

    def update_verification(
        self, provider_id: int, background_check_passed: bool, status: VerificationStatus
    ) -> bool:
        """
        Overwrite verification fields of a provider in a single UPDATE.

        Returns:
            True if a row was updated, False if the provider does not exist
        """
        sql = """
            UPDATE providers
            SET background_check_passed = %s,
                verification_status = %s,
                updated_at = NOW()
            WHERE id = %s
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (background_check_passed, int(status), provider_id))
            conn.commit()
            return cursor.rowcount == 1

    def get_provider(self, provider_id: int) -> Provider | None:
        sql = """
            SELECT id, name, credentials, background_check_passed, verification_status
            FROM providers
            WHERE id = %s
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (provider_id,))
            row = cursor.fetchone()

        if row is None:
            return None

        return Provider(
            id=row[0],
            name=row[1],
            credentials=row[2],
            background_check_passed=row[3],
            verification_status=VerificationStatus(row[4]),
        )

    def get_provider_id(self, principal: str) -> int | None:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                "SELECT provider_id FROM principal_providers WHERE principal = %s",
                (principal,),
            )
            row = cursor.fetchone()
        return row[0] if row is not None else None

    def provider_count(self) -> int:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT provider_count FROM registry_meta WHERE id = 1")
            row = cursor.fetchone()
        return row[0] if row is not None else 0


MIGRATIONS_PACKAGE = "provider_registry.migrations"


def migration_files() -> list:
    """
    List the SQL migrations shipped inside the package, sorted by filename.

    Read through importlib.resources so an installed wheel finds them too.
    """
    migrations_dir = resources.files(MIGRATIONS_PACKAGE)
    return sorted(
        (entry for entry in migrations_dir.iterdir() if entry.name.endswith(".sql")),
        key=lambda entry: entry.name,
    )


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations package.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance

    Raises:
        RuntimeError: If no migration is packaged or one fails
    """
    sql_files = migration_files()

    if not sql_files:
        logger.error(f"No migration files found in {MIGRATIONS_PACKAGE}")
        raise RuntimeError(f"No database migrations packaged in {MIGRATIONS_PACKAGE}")

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text(encoding="utf-8")

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
