"""The navigator — current directory plus ``cd``, ``ls``, and ``cat``.

The navigator is the terminal's idea of "where am I".  It keeps the
current working directory as a tuple of name components (empty means
the root) and answers the three browsing commands against a read-only
``PathTree``.

Path construction is shared by every command that takes a path:

1. A leading ``/`` starts from the root; anything else starts from the
   current directory.
2. The rest is split on ``/`` and empty segments are dropped, so
   ``a//b/`` is the same as ``a/b``.
3. Segments are folded left to right: ``..`` pops one component (and
   does nothing at the root), ``.`` is skipped, any other name is pushed
   as-is.  Existence is only checked once, on the finished path.

Nothing here raises for user input.  ``cd`` answers with a bool and
``cat`` with a ``CatResult`` whose content carries the error text, so
the caller decides what to show.
"""

from __future__ import annotations

from dataclasses import dataclass

from py_term.fs.nodes import Directory, File, Node
from py_term.fs.tree import PathTree

_PARENT = ".."
_CURRENT = "."


@dataclass(frozen=True)
class CatResult:
    """What ``cat`` hands back to the UI.

    ``title`` and ``url`` are empty for plain text and for errors.
    """

    title: str
    content: str
    url: str = ""


class Navigator:
    """Track a current directory inside a path tree."""

    def __init__(self, tree: PathTree) -> None:
        """Create a navigator positioned at the root of *tree*."""
        self._tree = tree
        self._current_path: tuple[str, ...] = ()

    @property
    def tree(self) -> PathTree:
        """Return the tree being navigated."""
        return self._tree

    @property
    def current_path(self) -> tuple[str, ...]:
        """Return the current directory as name components."""
        return self._current_path

    def pwd(self) -> str:
        """Return the current directory as an absolute path string."""
        if not self._current_path:
            return "/"
        return "/" + "/".join(self._current_path)

    def _build_path(self, raw: str) -> tuple[str, ...]:
        """Fold *raw* onto the current (or root) path without resolving it."""
        if raw.startswith("/"):
            components: list[str] = []
            raw = raw[1:]
        else:
            components = list(self._current_path)

        for segment in raw.split("/"):
            if not segment or segment == _CURRENT:
                continue
            if segment == _PARENT:
                if components:
                    components.pop()
                continue
            components.append(segment)
        return tuple(components)

    def resolve(self, raw: str) -> Node | None:
        """Return the node *raw* points at, or None.

        Uses the same path rules as ``cd`` and ``cat`` but never moves
        the current directory.
        """
        return self._tree.resolve(self._build_path(raw))

    def cd(self, raw: str) -> bool:
        """Change the current directory.

        Args:
            raw: An absolute or relative path as typed by the user.

        Returns:
            True if the path resolved to a directory (and the current
            directory moved there); False if it is missing or a file,
            in which case nothing changes.

        """
        candidate = self._build_path(raw)
        if isinstance(self._tree.resolve(candidate), Directory):
            self._current_path = candidate
            return True
        return False

    def ls(self) -> str:
        """List the current directory.

        Entries appear in the tree's insertion order separated by tabs.
        Directories are shown as ``/name``, files as ``name``.
        """
        node = self._tree.resolve(self._current_path)
        if not isinstance(node, Directory):
            # Unreachable while the tree stays immutable; cd only commits directories.
            return ""

        names: list[str] = []
        for child in node.children.values():
            match child:
                case Directory(name=name):
                    names.append("/" + name)
                case File(name=name):
                    names.append(name)
        return "\t".join(names)

    def cat(self, raw: str) -> CatResult:
        """Return the contents of the file at *raw*.

        Error messages echo *raw* exactly as given, not the normalised
        path.
        """
        match self.resolve(raw):
            case None:
                return CatResult(title="", content=f"cat: {raw}: No such file or directory")
            case Directory():
                return CatResult(title="", content=f"cat: {raw}: Is a directory")
            case File(content=content, title=title, url=url):
                return CatResult(title=title, content=content, url=url)
