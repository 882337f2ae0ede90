"""Postgres connection pool shared by the seen-state backend and ``init``."""

import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool


class DatabaseConfig:
    """Connection settings taken from the ``postgres`` config section."""

    def __init__(self, config: Dict[str, Any]) -> None:
        self.host = config.get("host", "localhost")
        self.port = config.get("port", 5432)
        self.database = config.get("database", "rsspush")
        self.user = config.get("user", "rsspush")

        # A set password_env variable wins over an inline password
        password_env = config.get("password_env")
        env_password = os.environ.get(password_env) if password_env else None
        self.password = env_password or config.get("password") or ""

    @property
    def conninfo(self) -> str:
        """libpq connection string, quoted by psycopg."""
        return make_conninfo(
            host=self.host,
            port=self.port,
            dbname=self.database,
            user=self.user,
            password=self.password or None,
        )

    @property
    def location(self) -> str:
        """Connection target without credentials."""
        return f"postgresql://{self.host}:{self.port}/{self.database}"


_pool: Optional[ConnectionPool] = None


def _get_pool(config: Dict[str, Any]) -> ConnectionPool:
    global _pool
    if _pool is None:
        _pool = ConnectionPool(
            DatabaseConfig(config).conninfo,
            min_size=1,
            max_size=10,
            kwargs={"row_factory": dict_row},
            open=True,
        )
    return _pool


def close_connection_pool() -> None:
    """Close the shared pool, if one was opened."""
    global _pool
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection(config: Dict[str, Any]) -> Iterator[psycopg.Connection]:
    """Borrow a connection from the shared pool."""
    with _get_pool(config).connection() as conn:
        yield conn
