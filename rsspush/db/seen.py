"""Postgres-backed seen-state."""

from typing import Any, Dict

import psycopg

from ..errors import StorageError
from ..seen.backends import SeenBackend
from .connection import DatabaseConfig, get_connection


class PostgresSeenBackend(SeenBackend):
    """Store identifiers in the ``seen_entries`` table."""

    def __init__(self, db_config: Dict[str, Any]) -> None:
        self.db_config = db_config

    def contains(self, identifier: str) -> bool:
        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        "SELECT 1 FROM seen_entries WHERE identifier = %s",
                        (identifier,),
                    )
                    return cur.fetchone() is not None
        except psycopg.Error as e:
            raise StorageError(f"seen-state lookup failed: {e}") from e

    def add(self, identifier: str) -> None:
        try:
            with get_connection(self.db_config) as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO seen_entries (identifier)
                        VALUES (%s)
                        ON CONFLICT (identifier) DO NOTHING
                        """,
                        (identifier,),
                    )
                conn.commit()
        except psycopg.Error as e:
            raise StorageError(f"seen-state update failed: {e}") from e

    def describe(self) -> str:
        return DatabaseConfig(self.db_config).location
