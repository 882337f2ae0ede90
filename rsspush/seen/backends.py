"""Seen-state storage backends."""

import hashlib
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Set

from ..errors import StorageError


class SeenBackend(ABC):
    """Persistence medium behind a SeenStore."""

    @abstractmethod
    def contains(self, identifier: str) -> bool:
        """Whether the identifier has been recorded."""
        pass

    @abstractmethod
    def add(self, identifier: str) -> None:
        """Durably record the identifier. Must tolerate duplicates."""
        pass

    def flush(self) -> None:
        """Make any buffered state durable."""

    def describe(self) -> str:
        """Human-readable location, used in diagnostics."""
        return self.__class__.__name__


class MemorySeenBackend(SeenBackend):
    """Set-backed backend; nothing survives the process."""

    def __init__(self, identifiers: Iterable[str] = ()) -> None:
        self.identifiers: Set[str] = set(identifiers)

    def contains(self, identifier: str) -> bool:
        return identifier in self.identifiers

    def add(self, identifier: str) -> None:
        self.identifiers.add(identifier)

    def describe(self) -> str:
        return "memory"


class FileSeenBackend(SeenBackend):
    """
    One marker file per identifier inside a directory.

    Files are named by the SHA-1 of the identifier, so any identifier
    (URLs included) maps to a safe file name.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory).expanduser()

    def _path_for(self, identifier: str) -> Path:
        digest = hashlib.sha1(identifier.encode("utf-8")).hexdigest()
        return self.directory / digest

    def contains(self, identifier: str) -> bool:
        path = self._path_for(identifier)
        try:
            return path.is_file()
        except OSError as e:
            raise StorageError(f"cannot read seen-state at {path}: {e}") from e

    def add(self, identifier: str) -> None:
        path = self._path_for(identifier)
        try:
            if path.is_file():
                return
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(identifier)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"cannot record seen-state at {path}: {e}") from e

    def flush(self) -> None:
        if not self.directory.is_dir() or not hasattr(os, "O_DIRECTORY"):
            return
        try:
            fd = os.open(self.directory, os.O_RDONLY | os.O_DIRECTORY)
            try:
                os.fsync(fd)
            finally:
                os.close(fd)
        except OSError as e:
            raise StorageError(f"cannot flush seen-state at {self.directory}: {e}") from e

    def describe(self) -> str:
        return str(self.directory)
