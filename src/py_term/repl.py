"""Interactive REPL (Read-Eval-Print Loop) for the terminal.

The REPL boots the site image via the bootloader, takes the shell it
returns, and enters the classic loop:

    1. **Read** — display a prompt and read user input.
    2. **Eval** — pass the line to ``shell.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until the shell reports ``halted``.

The helper functions (``build_prompt``, ``format_boot_log``,
``format_result``) are pure and testable.  ``run()`` is the I/O
entrypoint.

Arrow-key recall here is readline's: its line editor keeps its own copy
of each line and redraws it on up/down, so ``Shell.recall`` is not
called.  Every line still goes through ``shell.execute()``, so the
shell's ``HistoryCursor`` holds the same entries and backs the
``history`` command.  The web UI, which has no line editor, sends its
arrow keys to ``Shell.recall`` instead.
"""

import readline
import sys
from pathlib import Path

from py_term.bootloader import Bootloader, BootError
from py_term.completer import Completer
from py_term.shell import CommandResult, Shell

_BANNER_WIDTH = 38

# ANSI: clear screen and move the cursor home.
CLEAR_SCREEN = "\033[2J\033[H"


def format_boot_log(boot_log: list[str], motd: str = "") -> str:
    """Format the boot log into a displayable banner string.

    Args:
        boot_log: Messages collected by the bootloader.
        motd: Optional greeting shown under the log.

    Returns:
        A formatted string suitable for printing to the console.

    """
    border = "=" * _BANNER_WIDTH
    header = f"\n  {border}\n              py-term\n      A tiny read-only terminal\n  {border}\n\n"
    body = "\n".join(f"  {msg}" for msg in boot_log)
    footer = f"\n{motd}\n" if motd else "\nType 'help' for commands, 'exit' to quit.\n"
    return header + body + footer


def build_prompt(shell: Shell) -> str:
    """Return the prompt string for the shell's current directory."""
    return shell.prompt()


def format_result(result: CommandResult) -> str:
    """Render a command result as plain terminal text.

    ``ls`` output is tab-separated already; a ``cat`` with a title gets
    it as a header line and a url as a trailing line.
    """
    lines: list[str] = []
    if result.title:
        lines.append(f"# {result.title}")
    if result.output:
        lines.append(result.output)
    if result.url:
        lines.append(f"-> {result.url}")
    return "\n".join(lines)


def run(argv: list[str] | None = None) -> None:
    """Boot the terminal and run the interactive REPL.

    This is the ``py-term`` console entry point.  An optional first
    argument names a JSON site image to load instead of the default.
    """
    args = sys.argv[1:] if argv is None else argv
    bootloader = Bootloader(image_path=Path(args[0]) if args else None)
    try:
        shell = bootloader.boot()
    except BootError as e:
        print(f"Boot failed: {e}", file=sys.stderr)  # noqa: T201
        raise SystemExit(1) from e

    # Wire up tab completion via readline.
    completer = Completer(shell)
    readline.set_completer(completer.complete)
    readline.set_completer_delims(" \t")
    readline.parse_and_bind("tab: complete")

    motd = bootloader.image.motd if bootloader.image is not None else ""
    print(format_boot_log(bootloader.boot_log, motd))  # noqa: T201

    try:
        while True:
            try:
                line = input(build_prompt(shell))
            except EOFError:
                # Ctrl+D — graceful exit
                print()  # noqa: T201
                break

            result = shell.execute(line)
            if result.clear:
                print(CLEAR_SCREEN, end="")  # noqa: T201
            text = format_result(result)
            if text:
                print(text)  # noqa: T201
            if result.halted:
                break

    except KeyboardInterrupt:
        # Ctrl+C — graceful exit
        print("\nInterrupted.")  # noqa: T201
