"""Tests for the shell command dispatcher.

The shell records each line in the history, dispatches the command,
and returns a ``CommandResult``.  It never raises for user input.
"""

from py_term.bootloader import Bootloader
from py_term.fs.nodes import Directory, File
from py_term.fs.tree import PathTree
from py_term.history import HistoryCursor
from py_term.logging import LogLevel
from py_term.navigator import Navigator
from py_term.shell import CommandResult, Shell


def _booted_shell() -> Shell:
    """Boot the default site image and return its shell."""
    return Bootloader().boot()


class TestDispatch:
    """Verify parsing and dispatch."""

    def test_blank_line(self) -> None:
        """A blank line produces an empty result."""
        shell = _booted_shell()
        assert shell.execute("   ") == CommandResult()

    def test_unknown_command(self) -> None:
        """An unknown command returns an error message."""
        shell = _booted_shell()
        result = shell.execute("rm -rf /")
        assert result.output == "Unknown command: rm"

    def test_command_names(self) -> None:
        """command_names lists every dispatchable command."""
        shell = _booted_shell()
        assert {"cd", "ls", "cat", "clear", "cls", "help", "?"} <= set(shell.command_names)

    def test_result_str_is_output(self) -> None:
        """str() of a result is its display text."""
        shell = _booted_shell()
        assert str(shell.execute("pwd")) == "/"


class TestNavigationCommands:
    """Verify cd, ls, pwd, and cat through the shell."""

    def test_ls_root(self) -> None:
        """ls lists the default tree's root."""
        shell = _booted_shell()
        assert shell.execute("ls").output == "/projects\t/docs\tabout.md\tcontact.md"

    def test_cd_then_pwd(self) -> None:
        """cd changes the directory reported by pwd."""
        shell = _booted_shell()
        assert shell.execute("cd projects/py-term").output == ""
        assert shell.execute("pwd").output == "/projects/py-term"

    def test_cd_without_argument_goes_to_root(self) -> None:
        """A bare cd returns to the root."""
        shell = _booted_shell()
        shell.execute("cd projects")
        shell.execute("cd")
        assert shell.navigator.pwd() == "/"

    def test_cd_missing(self) -> None:
        """cd to a missing path reports it."""
        shell = _booted_shell()
        result = shell.execute("cd nowhere")
        assert result.output == "cd: nowhere: No such file or directory"

    def test_cd_file(self) -> None:
        """cd to a file reports 'Not a directory'."""
        shell = _booted_shell()
        result = shell.execute("cd about.md")
        assert result.output == "cd: about.md: Not a directory"
        assert shell.navigator.pwd() == "/"

    def test_cat_file(self) -> None:
        """cat returns content plus title and url."""
        shell = _booted_shell()
        result = shell.execute("cat /projects/py-term/README.md")
        assert result.title == "py-term"
        assert result.url.startswith("https://")
        assert "terminal" in result.output

    def test_cat_directory(self) -> None:
        """cat on a directory reports it."""
        shell = _booted_shell()
        assert shell.execute("cat docs").output == "cat: docs: Is a directory"

    def test_cat_missing(self) -> None:
        """cat on a missing file reports it."""
        shell = _booted_shell()
        assert shell.execute("cat nope.txt").output == "cat: nope.txt: No such file or directory"

    def test_cat_usage(self) -> None:
        """cat without a path shows usage."""
        shell = _booted_shell()
        assert "usage" in shell.execute("cat").output.lower()


class TestArguments:
    """Verify that the rest of the line is a single argument."""

    @staticmethod
    def _spaced_shell() -> Shell:
        """Build a shell over a tree whose names contain spaces."""
        notes = File(name="my notes.md", content="remember the milk")
        old = Directory(name="old stuff", children={"my notes.md": notes})
        root = Directory(name="", children={"old stuff": old})
        return Shell(navigator=Navigator(PathTree(root)))

    def test_cat_name_with_space(self) -> None:
        """A file name containing a space can be read."""
        shell = self._spaced_shell()
        assert shell.execute("cat old stuff/my notes.md").output == "remember the milk"

    def test_cd_name_with_space(self) -> None:
        """A directory name containing a space can be entered."""
        shell = self._spaced_shell()
        assert shell.execute("cd old stuff").output == ""
        assert shell.navigator.pwd() == "/old stuff"

    def test_surrounding_whitespace_ignored(self) -> None:
        """Leading and trailing blanks around the argument are dropped."""
        shell = self._spaced_shell()
        shell.execute("  cd   old stuff   ")
        assert shell.navigator.pwd() == "/old stuff"

    def test_extra_words_are_not_dropped(self) -> None:
        """'cd a b' looks for 'a b', not 'a'."""
        shell = _booted_shell()
        result = shell.execute("cd docs extra")
        assert result.output == "cd: docs extra: No such file or directory"
        assert shell.navigator.pwd() == "/"


class TestScreenCommands:
    """Verify clear, help, and exit."""

    def test_clear(self) -> None:
        """clear asks the UI to clear the screen."""
        shell = _booted_shell()
        assert shell.execute("clear").clear is True

    def test_cls_alias(self) -> None:
        """cls behaves like clear."""
        shell = _booted_shell()
        assert shell.execute("cls").clear is True

    def test_help_lists_commands(self) -> None:
        """help mentions every command."""
        shell = _booted_shell()
        output = shell.execute("help").output
        for name in ("clear", "cls", "help", "ls", "cd", "cat"):
            assert name in output

    def test_question_mark_alias(self) -> None:
        """'?' is the same as help."""
        shell = _booted_shell()
        assert shell.execute("?").output == shell.execute("help").output

    def test_exit(self) -> None:
        """exit marks the result as halted."""
        shell = _booted_shell()
        assert shell.execute("exit").halted is True


class TestShellHistory:
    """Verify history recording and recall through the shell."""

    def test_every_line_recorded(self) -> None:
        """All lines are recorded as typed, including unknown ones."""
        shell = _booted_shell()
        shell.execute("ls")
        shell.execute("bogus")
        shell.execute("")
        assert shell.history.entries == ["ls", "bogus", ""]

    def test_history_command_lists_itself(self) -> None:
        """history shows numbered entries including itself."""
        shell = _booted_shell()
        shell.execute("pwd")
        output = shell.execute("history").output
        assert "1  pwd" in output
        assert "2  history" in output

    def test_recall(self) -> None:
        """recall walks the history like arrow keys."""
        shell = _booted_shell()
        shell.execute("ls")
        shell.execute("pwd")
        assert shell.recall("up") == "pwd"
        assert shell.recall("up") == "ls"
        assert shell.recall("down") == "pwd"
        assert shell.recall("down") is None

    def test_injected_history(self) -> None:
        """A history passed in is the one the shell records into."""
        history = HistoryCursor()
        shell = Shell(navigator=_booted_shell().navigator, history=history)
        shell.execute("ls")
        assert history.entries == ["ls"]


class TestShellLogging:
    """Verify what the shell writes to its log."""

    def test_commands_logged(self) -> None:
        """Dispatched commands are logged at INFO."""
        shell = _booted_shell()
        shell.execute("ls")
        messages = [e.message for e in shell.logger.filter(source="shell")]
        assert "ls" in messages

    def test_failed_cd_logged(self) -> None:
        """A failed cd is logged as a warning."""
        shell = _booted_shell()
        shell.execute("cd nowhere")
        warnings = shell.logger.filter(min_level=LogLevel.WARNING, source="nav")
        assert len(warnings) == 1
        assert "nowhere" in warnings[0].message

    def test_successful_cat_not_warned(self) -> None:
        """Reading a real file logs no warning."""
        shell = _booted_shell()
        shell.execute("cat about.md")
        assert shell.logger.filter(min_level=LogLevel.WARNING) == []

    def test_unknown_command_logged(self) -> None:
        """Unknown commands are logged as warnings."""
        shell = _booted_shell()
        shell.execute("frobnicate")
        warnings = shell.logger.filter(min_level=LogLevel.WARNING)
        assert any("frobnicate" in e.message for e in warnings)

    def test_log_command(self) -> None:
        """The log command shows boot and command entries."""
        shell = _booted_shell()
        shell.execute("pwd")
        output = shell.execute("log").output
        assert "#1 INFO boot:" in output
        assert "#3 INFO shell: pwd" in output

    def test_log_warnings_only(self) -> None:
        """'log warnings' shows just the failures, keeping their numbers."""
        shell = _booted_shell()
        shell.execute("ls")
        shell.execute("cat nope.txt")
        output = shell.execute("log warnings").output
        assert output == "#5 WARNING nav: cat: nope.txt: No such file or directory"

    def test_log_by_source(self) -> None:
        """'log boot' shows only bootloader entries."""
        shell = _booted_shell()
        shell.execute("pwd")
        lines = shell.execute("log boot").output.splitlines()
        assert len(lines) == 2  # noqa: PLR2004
        assert all(" boot: " in line for line in lines)

    def test_log_no_match(self) -> None:
        """A filter with no matches says so."""
        shell = _booted_shell()
        assert shell.execute("log warnings").output == "No log entries."


class TestPrompt:
    """Verify the prompt string."""

    def test_prompt_shows_cwd(self) -> None:
        """The prompt includes user, host, and directory."""
        shell = _booted_shell()
        shell.execute("cd projects")
        assert shell.prompt() == "guest@pyterm:/projects $ "
