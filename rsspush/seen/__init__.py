"""Persistent seen-state for feed entries."""

from ..config import Config
from .backends import FileSeenBackend, MemorySeenBackend, SeenBackend
from .store import SeenStore


def open_seen_store(config: Config) -> SeenStore:
    """Build the SeenStore selected by the configuration."""
    backend_name = config.config.seen.backend

    if backend_name == "postgres":
        from ..db.seen import PostgresSeenBackend

        backend: SeenBackend = PostgresSeenBackend(config.get_db_config())
    elif backend_name == "memory":
        backend = MemorySeenBackend()
    else:
        backend = FileSeenBackend(config.seen_path)

    return SeenStore(backend)


__all__ = [
    "FileSeenBackend",
    "MemorySeenBackend",
    "SeenBackend",
    "SeenStore",
    "open_seen_store",
]
