"""Command history with up/down recall.

Every line the user enters is appended to the history.  A cursor then
lets the UI walk backwards and forwards through it, the way the up and
down arrows work in a shell.

The cursor lives in ``[0, len(entries)]``.  The top value,
``len(entries)``, is the "blank line" position just past the newest
command; that is where the cursor goes after every ``record``.  Moving
past either end is not an error, the cursor just stays put.

    entries:  ls    cd /projects    cat README.md
    cursor:   0     1               2                3 (blank)
"""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Arrow-key direction tags sent by the UI."""

    UP = "up"
    DOWN = "down"


class HistoryCursor:
    """An append-only list of commands and a recall cursor."""

    def __init__(self) -> None:
        """Create an empty history with the cursor at 0."""
        self._entries: list[str] = []
        self._cursor: int = 0

    @property
    def entries(self) -> list[str]:
        """Return all recorded commands, oldest first."""
        return list(self._entries)

    @property
    def cursor(self) -> int:
        """Return the current cursor position."""
        return self._cursor

    def __len__(self) -> int:
        """Return the number of recorded commands."""
        return len(self._entries)

    def record(self, command: str) -> None:
        """Append *command* and move the cursor past it.

        Every command is kept, including blanks and repeats.  Callers
        that want filtering do it before calling.
        """
        self._entries.append(command)
        self._cursor = len(self._entries)

    def move_up(self) -> None:
        """Step towards older commands, stopping at the oldest."""
        if self._cursor <= 0:
            self._cursor = 0
        else:
            self._cursor -= 1

    def move_down(self) -> None:
        """Step towards newer commands, stopping at the blank line."""
        if self._cursor + 1 > len(self._entries):
            self._cursor = len(self._entries)
        else:
            self._cursor += 1

    def current(self) -> str | None:
        """Return the command under the cursor, or None on the blank line."""
        if self._cursor >= len(self._entries):
            return None
        return self._entries[self._cursor]

    def traverse(self, direction: Direction | str) -> str | None:
        """Move one step in *direction* and return the command there.

        Tags other than ``"up"`` and ``"down"`` leave the cursor alone.
        """
        if direction == Direction.UP:
            self.move_up()
        elif direction == Direction.DOWN:
            self.move_down()
        return self.current()
