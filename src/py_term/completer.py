"""Context-aware tab completer for the terminal shell.

The completer separates **what to complete** (pure logic, fully
testable) from **how to wire it** (readline integration in the REPL).

The ``complete(text, state)`` method is the readline callback.  It
delegates to ``completions(text, line)`` which looks at the input so far
and returns a list of candidate strings.
"""

from __future__ import annotations

import readline
from typing import TYPE_CHECKING

from py_term.commands import Command
from py_term.fs.nodes import Directory

if TYPE_CHECKING:
    from py_term.shell import Shell

# Commands whose argument is a path in the file tree.
_PATH_COMMANDS: frozenset[str] = frozenset([Command.CD.value, Command.CAT.value])


class Completer:
    """Complete command names and file tree paths."""

    def __init__(self, shell: Shell) -> None:
        """Create a completer attached to a shell instance.

        Args:
            shell: The shell whose commands and navigator are used to
                   generate completion candidates.

        """
        self._shell = shell

    def complete(self, text: str, state: int) -> str | None:
        """Readline callback — return the *state*-th candidate for *text*.

        Args:
            text: The partial word being completed.
            state: Index into the candidate list (0, 1, 2, …).

        Returns:
            The candidate at *state*, or ``None`` when exhausted.

        """
        line = readline.get_line_buffer()
        candidates = self.completions(text, line)
        if state < len(candidates):
            return candidates[state]
        return None

    def completions(self, text: str, line: str) -> list[str]:
        """Return completion candidates based on context.

        Args:
            text: The partial word under the cursor.
            line: The full input line so far.

        Returns:
            Sorted list of matching candidates.

        """
        words = line.lstrip().split()

        # No words yet, or still typing the first word → command completion
        if not words or (len(words) == 1 and not line.endswith(" ")):
            return [cmd for cmd in self._shell.command_names if cmd.startswith(text)]

        if words[0] in _PATH_COMMANDS:
            return self._complete_paths(text)
        return []

    def _complete_paths(self, text: str) -> list[str]:
        """Complete absolute or relative paths.

        Split the partial path into a directory and a name prefix,
        resolve the directory through the navigator, and filter its
        children by prefix.  Directories get a trailing ``/``.
        """
        last_slash = text.rfind("/")
        directory = text[: last_slash + 1]
        prefix = text[last_slash + 1 :]

        node = self._shell.navigator.resolve(directory)
        if not isinstance(node, Directory):
            return []

        candidates: list[str] = []
        for name, child in node.children.items():
            if name.startswith(prefix):
                suffix = "/" if isinstance(child, Directory) else ""
                candidates.append(f"{directory}{name}{suffix}")
        return sorted(candidates)
