"""Database management for rsspush."""

from .connection import close_connection_pool, get_connection
from .init import init_database, validate_connection

__all__ = [
    "close_connection_pool",
    "get_connection",
    "init_database",
    "validate_connection",
]
