"""Session log for the terminal.

Every command the shell dispatches, every path that could not be
found, and every bootloader step is written to an in-memory session
log.  Users read it back with the ``log`` command:

    log            everything, oldest first
    log warnings   only the problems
    log nav        only entries from one component

Entries are numbered in the order they were written, so a filtered
view still shows where each entry sits in the session.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """How serious an entry is; ordered so filtering can use ``>=``."""

    INFO = 1
    WARNING = 2


@dataclass(frozen=True)
class LogEntry:
    """One numbered line of the session log.

    Attributes:
        number: Position in the session, starting at 1.
        level: INFO for normal activity, WARNING for failed lookups.
        message: What happened.
        source: The component that wrote it (``boot``, ``shell``, ``nav``).

    """

    number: int
    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``#3 WARNING nav: cd x: Not a directory``."""
        return f"#{self.number} {self.level.name} {self.source}: {self.message}"


class Logger:
    """The session's append-only log."""

    def __init__(self) -> None:
        """Create an empty log."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return every entry, oldest first."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append an entry numbered after the last one."""
        self._entries.append(
            LogEntry(number=len(self._entries) + 1, level=level, message=message, source=source)
        )

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return the entries at or above *min_level* and from *source*.

        Either criterion may be omitted.
        """
        return [
            e
            for e in self._entries
            if (min_level is None or e.level >= min_level) and (source is None or e.source == source)
        ]
