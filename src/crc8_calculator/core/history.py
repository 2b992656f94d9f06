"""Bounded calculation history with pluggable storage."""

import asyncio
import logging
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter

from crc8_calculator.core.models import ComputationResult, HistoryEntry
from crc8_calculator.protocol.codec import replace_lone_surrogates
from crc8_calculator.protocol.constants import HISTORY_INPUT_MAX_LEN, HISTORY_SIZE, InputFormat

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[HistoryEntry])


class HistoryStorage(Protocol):
    """Persistence backend for history entries (newest first)."""

    def load(self) -> list[HistoryEntry]: ...

    def save(self, entries: list[HistoryEntry]) -> None: ...

    def clear(self) -> None: ...


class MemoryHistoryStorage:
    """Keeps history for the lifetime of the process only."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def load(self) -> list[HistoryEntry]:
        return list(self._entries)

    def save(self, entries: list[HistoryEntry]) -> None:
        self._entries = list(entries)

    def clear(self) -> None:
        self._entries = []


class JsonFileHistoryStorage:
    """Stores history as a JSON list in a single file.

    A missing or unreadable file loads as an empty history.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> list[HistoryEntry]:
        if not self.path.exists():
            return []
        try:
            return _entries_adapter.validate_json(self.path.read_bytes())
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable history file %s: %s", self.path, e)
            return []

    def save(self, entries: list[HistoryEntry]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_entries_adapter.dump_json(entries, indent=2))
        except OSError as e:
            logger.warning("Failed to save history to %s: %s", self.path, e)

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to remove history file %s: %s", self.path, e)


def truncate_input(data: str, max_len: int = HISTORY_INPUT_MAX_LEN) -> str:
    """Shorten input for display, marking the cut with "..."."""
    if len(data) > max_len:
        return data[:max_len] + "..."
    return data


class CalculationHistory:
    """Most recent successful computations, newest first.

    Holds at most ``max_entries`` entries; adding beyond that evicts the
    oldest. Access is async-safe using asyncio.Lock(); storage I/O runs in
    a worker thread. Storage failures leave the in-memory entries as the
    source of truth until the next successful save.
    """

    def __init__(self, storage: HistoryStorage | None = None, max_entries: int = HISTORY_SIZE) -> None:
        """Initialize history, loading any entries already in storage."""
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._lock = asyncio.Lock()
        self._storage: HistoryStorage = storage if storage is not None else MemoryHistoryStorage()
        self._max_entries = max_entries
        self._entries: list[HistoryEntry] = self._storage.load()[:max_entries]

    async def add(self, result: ComputationResult, data: str, input_format: InputFormat) -> HistoryEntry | None:
        """Record a computation. Failed results are not recorded."""
        if not result.success:
            return None

        entry = HistoryEntry(
            input=truncate_input(replace_lone_surrogates(data)),
            input_format=input_format,
            algorithm=result.algorithm_name,
            result=result.hex,
            full_result=result,
        )

        async with self._lock:
            self._entries.insert(0, entry)
            del self._entries[self._max_entries :]
            await asyncio.to_thread(self._storage.save, list(self._entries))

        return entry

    async def get_all(self) -> list[HistoryEntry]:
        """Get all entries, newest first."""
        async with self._lock:
            return list(self._entries)

    async def get(self, index: int) -> HistoryEntry | None:
        """Get entry by position (0 = newest)."""
        async with self._lock:
            if 0 <= index < len(self._entries):
                return self._entries[index]
            return None

    async def clear(self) -> int:
        """Remove all entries. Returns the number removed."""
        async with self._lock:
            removed = len(self._entries)
            self._entries = []
            await asyncio.to_thread(self._storage.clear)
            return removed

    @property
    def max_entries(self) -> int:
        """Maximum number of entries kept."""
        return self._max_entries

    @property
    def count(self) -> int:
        """Get number of entries."""
        return len(self._entries)
