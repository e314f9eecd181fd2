"""Ordered record collections persisted one text line per record.

The collection owns its records; callers get copies of the backing list, never
the list itself. Loading is all-or-nothing: a malformed line raises
``ParseError`` and the in-memory contents stay as they were.
"""

from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Protocol,
    Sequence,
    TypeVar,
)

from .errors import ParseError, StorageError

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)


class StorageBackend(Protocol):
    """Protocol for line based persistence."""

    def load_all(self) -> List[str]:
        """Return every stored line, without trailing newlines."""
        ...

    def save_all(self, lines: Sequence[str]) -> None:
        """Replace the stored lines."""
        ...


class MemoryBackend:
    """Keeps lines in process; handy for tests and dry runs."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self.lines: List[str] = list(lines or [])

    def load_all(self) -> List[str]:
        return list(self.lines)

    def save_all(self, lines: Sequence[str]) -> None:
        self.lines = list(lines)


class TextFileBackend:
    """UTF-8 text file, one record per line.

    A missing file loads as empty. Saves go to a temporary file in the same
    directory which then replaces the target.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_all(self) -> List[str]:
        if not self.path.exists():
            LOGGER.debug("No data file at %s; starting empty", self.path)
            return []
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                return [line.rstrip("\r\n") for line in handle]
        except (OSError, UnicodeError) as exc:
            raise StorageError(f"Failed to read {self.path}: {exc}") from exc

    def save_all(self, lines: Sequence[str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                    for line in lines:
                        handle.write(line)
                        handle.write("\n")
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, UnicodeError) as exc:
            raise StorageError(f"Failed to write {self.path}: {exc}") from exc


class PersistedCollection(ABC, Generic[T]):
    """Generic ordered list of records with a text round-trip per record.

    Subclasses provide ``parse`` and ``unparse``; everything else (ordering,
    lookup, load/save against a ``StorageBackend``) lives here.
    """

    def __init__(
        self,
        backend: StorageBackend | None = None,
        items: Iterable[T] | None = None,
    ) -> None:
        self._backend: StorageBackend = backend or MemoryBackend()
        self._items: List[T] = list(items or [])

    # -- record conversion ----------------------------------------------
    @abstractmethod
    def parse(self, text: str) -> T:
        """Build a record from one persisted line, raising ``ParseError``."""

    @abstractmethod
    def unparse(self, item: T) -> str:
        """Return the persisted single-line form of ``item``."""

    # -- container protocol ---------------------------------------------
    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._items)} items)"

    def items(self) -> List[T]:
        return list(self._items)

    def append(self, item: T) -> None:
        self._items.append(item)

    def remove(self, item: T) -> None:
        self._items.remove(item)

    def pop(self, index: int = -1) -> T:
        return self._items.pop(index)

    def clear(self) -> None:
        self._items.clear()

    def find_matching(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items if predicate(item)]

    def sort_by(self, key: Callable[[T], Any], reverse: bool = False) -> None:
        """Sort in place; ``list.sort`` is stable, also when reversed."""

        self._items.sort(key=key, reverse=reverse)

    # -- persistence ------------------------------------------------------
    def load(self) -> None:
        lines = self._backend.load_all()
        loaded: List[T] = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                loaded.append(self.parse(line))
            except ParseError as exc:
                LOGGER.error(
                    "%s load aborted at line %d: %s",
                    self.__class__.__name__,
                    line_number,
                    exc,
                )
                raise ParseError(str(exc), line_number=line_number) from exc
        self._items = loaded
        LOGGER.info("Loaded %d records into %s", len(loaded), self.__class__.__name__)

    def save(self) -> None:
        lines = [self.unparse(item) for item in self._items]
        self._backend.save_all(lines)
        LOGGER.info("Saved %d records from %s", len(lines), self.__class__.__name__)


__all__ = [
    "MemoryBackend",
    "PersistedCollection",
    "StorageBackend",
    "TextFileBackend",
]
