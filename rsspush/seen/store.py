"""Identifier-keyed record of entries already dispatched."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

from .backends import SeenBackend


class SeenStore:
    """
    Presence-testing store of entry identifiers.

    The empty identifier can never be deduplicated: ``contains("")`` is
    always False and ``record("")`` is ignored, so such entries are
    dispatched on every run.

    ``claim`` serialises work on one identifier, so concurrent feed workers
    cannot both observe "not seen" for the same entry and both dispatch it.

    Backends raise StorageError when their medium fails.
    """

    def __init__(self, backend: SeenBackend) -> None:
        self.backend = backend
        self._locks: Dict[str, asyncio.Lock] = {}
        self._claims: Dict[str, int] = {}

    def contains(self, identifier: str) -> bool:
        """Whether the identifier has already been dispatched."""
        if not identifier:
            return False
        return self.backend.contains(identifier)

    def record(self, identifier: str) -> None:
        """Mark the identifier as dispatched. Idempotent."""
        if not identifier:
            return
        if not self.backend.contains(identifier):
            self.backend.add(identifier)

    def flush(self) -> None:
        """Make recorded state durable."""
        self.backend.flush()

    @asynccontextmanager
    async def claim(self, identifier: str) -> AsyncIterator[None]:
        """Hold the per-identifier lock for a check-dispatch-record sequence."""
        if not identifier:
            yield
            return

        lock = self._locks.setdefault(identifier, asyncio.Lock())
        self._claims[identifier] = self._claims.get(identifier, 0) + 1
        try:
            async with lock:
                yield
        finally:
            # Drop the lock once no worker holds or waits on it
            self._claims[identifier] -= 1
            if not self._claims[identifier]:
                del self._claims[identifier]
                del self._locks[identifier]

    def describe(self) -> str:
        return self.backend.describe()
