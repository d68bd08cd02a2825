"""The shell — command dispatcher for the terminal.

The shell takes a raw input line, records it in the history, splits it
into a command name and arguments, and dispatches to a handler.  The
browsing commands (``cd``, ``ls``, ``cat``, ``pwd``) are thin wrappers
around the ``Navigator``; the shell's own job is turning their return
values into something a user can read.

Design choices:
    - **Returns results, not prints.**  Every handler returns a
      ``CommandResult`` so the shell is fully testable and the REPL or
      web UI decides how to display it.
    - **Command dispatch via a dict.**  Adding a command means writing a
      method and adding one dict entry.
    - **Owns its collaborators.**  The navigator, history, and logger
      are plain objects passed in (or created) here; there is no
      process-wide store.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from py_term.commands import Command, format_help
from py_term.fs.nodes import File
from py_term.history import Direction, HistoryCursor
from py_term.logging import Logger, LogLevel
from py_term.navigator import Navigator

# Type alias for a command handler: takes a list of args, returns a result.
_Handler: TypeAlias = "Callable[[list[str]], CommandResult]"


@dataclass(frozen=True)
class CommandResult:
    """The outcome of one shell command.

    Attributes:
        output: Text to display (may be empty).
        title: Heading for a ``cat`` of a file that has one.
        url: Link for a ``cat`` of a file that has one.
        clear: True if the UI should clear the screen.
        halted: True if the session should end.

    """

    output: str = ""
    title: str = ""
    url: str = ""
    clear: bool = False
    halted: bool = False

    def __str__(self) -> str:
        """Return the display text."""
        return self.output


class Shell:
    """Command interpreter over a navigator and a command history."""

    def __init__(
        self,
        *,
        navigator: Navigator,
        history: HistoryCursor | None = None,
        logger: Logger | None = None,
        username: str = "guest",
        hostname: str = "pyterm",
    ) -> None:
        """Create a shell.

        Args:
            navigator: The navigator over the file tree.
            history: Command history; a fresh one is created if omitted.
            logger: Session log; a fresh one is created if omitted.
            username: User name shown in the prompt.
            hostname: Host name shown in the prompt.

        """
        self._navigator = navigator
        self._history = history if history is not None else HistoryCursor()
        self._logger = logger if logger is not None else Logger()
        self._username = username
        self._hostname = hostname

        # Command dispatch table — maps command names to handler methods.
        self._commands: dict[Command, _Handler] = {
            Command.CLEAR: self._cmd_clear,
            Command.CLS: self._cmd_clear,
            Command.HELP: self._cmd_help,
            Command.QUESTION: self._cmd_help,
            Command.LS: self._cmd_ls,
            Command.CD: self._cmd_cd,
            Command.CAT: self._cmd_cat,
            Command.PWD: self._cmd_pwd,
            Command.HISTORY: self._cmd_history,
            Command.LOG: self._cmd_log,
            Command.EXIT: self._cmd_exit,
        }

    @property
    def navigator(self) -> Navigator:
        """Return the navigator."""
        return self._navigator

    @property
    def history(self) -> HistoryCursor:
        """Return the command history."""
        return self._history

    @property
    def logger(self) -> Logger:
        """Return the session log."""
        return self._logger

    @property
    def command_names(self) -> list[str]:
        """Return every command name, sorted."""
        return sorted(command.value for command in self._commands)

    def prompt(self) -> str:
        """Return the prompt, e.g. ``guest@pyterm:/projects $ ``."""
        return f"{self._username}@{self._hostname}:{self._navigator.pwd()} $ "

    def execute(self, line: str) -> CommandResult:
        """Record and run one input line.

        Args:
            line: The raw line as typed (e.g. ``"cd /projects"``).

        Returns:
            The command's result.  Unknown commands and bad arguments
            produce a message, never an exception.

        """
        self._history.record(line)

        # Everything after the command name is one argument; names may hold spaces.
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return CommandResult()

        name = parts[0]
        args = [parts[1].strip()] if len(parts) > 1 else []
        try:
            command = Command(name)
        except ValueError:
            self._logger.log(LogLevel.WARNING, f"Unknown command: {name}", source="shell")
            return CommandResult(output=f"Unknown command: {name}")

        self._logger.log(LogLevel.INFO, line.strip(), source="shell")
        return self._commands[command](args)

    def recall(self, direction: Direction | str) -> str | None:
        """Move through the history for an arrow key and return the entry.

        Returns:
            The recalled command, or None on the blank line.

        """
        return self._history.traverse(direction)

    # -- Command handlers ------------------------------------------------

    def _cmd_clear(self, _args: list[str]) -> CommandResult:
        """Ask the UI to clear the screen."""
        return CommandResult(clear=True)

    def _cmd_help(self, _args: list[str]) -> CommandResult:
        """List available commands."""
        return CommandResult(output=format_help())

    def _cmd_ls(self, _args: list[str]) -> CommandResult:
        """List the current directory."""
        return CommandResult(output=self._navigator.ls())

    def _cmd_pwd(self, _args: list[str]) -> CommandResult:
        """Print the current directory."""
        return CommandResult(output=self._navigator.pwd())

    def _cmd_cd(self, args: list[str]) -> CommandResult:
        """Change directory; no argument means the root."""
        target = args[0] if args else "/"
        if self._navigator.cd(target):
            return CommandResult()

        if isinstance(self._navigator.resolve(target), File):
            reason = "Not a directory"
        else:
            reason = "No such file or directory"
        self._logger.log(LogLevel.WARNING, f"cd {target}: {reason}", source="nav")
        return CommandResult(output=f"cd: {target}: {reason}")

    def _cmd_cat(self, args: list[str]) -> CommandResult:
        """Show a file."""
        if not args:
            return CommandResult(output="Usage: cat <path>")

        target = args[0]
        result = self._navigator.cat(target)
        if not isinstance(self._navigator.resolve(target), File):
            self._logger.log(LogLevel.WARNING, result.content, source="nav")
        return CommandResult(output=result.content, title=result.title, url=result.url)

    def _cmd_history(self, _args: list[str]) -> CommandResult:
        """Show command history (including this ``history`` call)."""
        lines = [f"  {i + 1}  {cmd}" for i, cmd in enumerate(self._history.entries)]
        return CommandResult(output="\n".join(lines))

    def _cmd_log(self, args: list[str]) -> CommandResult:
        """Show the session log: all, ``warnings`` only, or one source."""
        if not args:
            entries = self._logger.entries
        elif args[0] == "warnings":
            entries = self._logger.filter(min_level=LogLevel.WARNING)
        else:
            entries = self._logger.filter(source=args[0])
        if not entries:
            return CommandResult(output="No log entries.")
        return CommandResult(output="\n".join(str(e) for e in entries))

    def _cmd_exit(self, _args: list[str]) -> CommandResult:
        """Signal the frontend to end the session."""
        self._logger.log(LogLevel.INFO, "Session ended", source="shell")
        return CommandResult(output="Goodbye.", halted=True)
