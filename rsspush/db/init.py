"""Schema setup for the Postgres seen-state backend."""

from typing import Any, Dict

import psycopg
from rich.console import Console

from .connection import get_connection

console = Console(stderr=True)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS seen_entries (
    identifier TEXT PRIMARY KEY,
    first_seen_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_seen_entries_first_seen_at ON seen_entries(first_seen_at);
"""


def validate_connection(config: Dict[str, Any]) -> bool:
    """Whether the configured database accepts a trivial query."""
    try:
        with get_connection(config) as conn:
            return conn.execute("SELECT 1").fetchone() is not None
    except psycopg.Error as e:
        console.print(f"[red]Database connection failed: {e}[/red]")
        return False


def init_database(config: Dict[str, Any]) -> None:
    """
    Create the ``seen_entries`` table if it does not exist.

    Raises:
        psycopg.Error: If the schema cannot be created
    """
    with get_connection(config) as conn:
        conn.execute(SCHEMA_SQL)
        conn.commit()
