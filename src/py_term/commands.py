"""Command names and their help text.

Each command the terminal understands is a ``Command`` member.  Some
come in pairs (``clear``/``cls``, ``help``/``?``); the alias is recorded
next to the description so ``help`` can show both spellings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Command(StrEnum):
    """Every command the shell dispatches."""

    CLEAR = "clear"
    CLS = "cls"
    HELP = "help"
    QUESTION = "?"
    LS = "ls"
    CD = "cd"
    CAT = "cat"
    PWD = "pwd"
    HISTORY = "history"
    LOG = "log"
    EXIT = "exit"


@dataclass(frozen=True)
class CommandInfo:
    """Help text for one command and its optional alias."""

    description: str
    alias: Command | None = None


COMMAND_DESCRIPTIONS: dict[Command, CommandInfo] = {
    Command.CLEAR: CommandInfo(
        "Clears the terminal screen of all previous output and commands.",
        alias=Command.CLS,
    ),
    Command.CLS: CommandInfo(
        "Clears the terminal screen of all previous output and commands (alias for clear).",
        alias=Command.CLEAR,
    ),
    Command.HELP: CommandInfo(
        "Displays a list of all available commands and their descriptions.",
        alias=Command.QUESTION,
    ),
    Command.QUESTION: CommandInfo(
        "Displays a list of all available commands and their descriptions (alias for help).",
        alias=Command.HELP,
    ),
    Command.LS: CommandInfo("Displays the list of directories available from the current directory."),
    Command.CD: CommandInfo("Changes the current directory to the selected directory."),
    Command.CAT: CommandInfo("Outputs the content of a specified file to the terminal."),
    Command.PWD: CommandInfo("Prints the current directory."),
    Command.HISTORY: CommandInfo("Lists the commands entered in this session."),
    Command.LOG: CommandInfo("Shows the session log; 'log warnings' or 'log <source>' narrows it."),
    Command.EXIT: CommandInfo("Ends the terminal session."),
}

# Width of the command column in help output.
_NAME_WIDTH = 8


def format_help() -> str:
    """Render one line per command, with its alias if it has one."""
    lines: list[str] = []
    for command, info in COMMAND_DESCRIPTIONS.items():
        alias = f" (alias: {info.alias})" if info.alias is not None else ""
        lines.append(f"{command.value:<{_NAME_WIDTH}} {info.description}{alias}")
    return "\n".join(lines)
