"""Named timings for the phases of a run."""

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass


class TimingError(RuntimeError):
    """Raised when a timing is started twice or ended without being open."""


@dataclass(kw_only=True)
class TimingEntry:
    """Start and end of a single named timing."""

    name: str
    start: float
    end: float | None = None

    @property
    def duration(self) -> float | None:
        if self.end is None:
            return None
        return self.end - self.start


class Timer:
    """Collects named timing entries in start order.

    A name can be timed more than once; every run keeps its own entry.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: list[TimingEntry] = []
        self._running: dict[str, TimingEntry] = {}

    @property
    def entries(self) -> tuple[TimingEntry, ...]:
        return tuple(self._entries)

    @property
    def total(self) -> float:
        """Sum of the durations of all closed entries."""
        return sum(
            entry.duration for entry in self._entries if entry.duration is not None
        )

    def start(self, name: str) -> TimingEntry:
        """Open a timing entry.

        Raises:
            TimingError: If an entry with this name is still open

        """
        if name in self._running:
            raise TimingError(f"Timing '{name}' is already running")

        entry = TimingEntry(name=name, start=self._clock())
        self._entries.append(entry)
        self._running[name] = entry
        return entry

    def end(self, name: str) -> TimingEntry:
        """Close a timing entry and return it.

        Raises:
            TimingError: If no open entry exists with this name

        """
        entry = self._running.pop(name, None)
        if entry is None:
            raise TimingError(f"Timing '{name}' is not running")

        entry.end = self._clock()
        return entry

    @contextmanager
    def time(self, name: str) -> Iterator[TimingEntry]:
        """Time the enclosed block, closing the entry even if it raises.

        The block may end the entry itself.
        """
        entry = self.start(name)
        try:
            yield entry
        finally:
            if entry.end is None:
                self.end(name)
