"""The path tree — a rooted, immutable tree of nodes.

Path resolution walks component by component from the root, looking up
each name in the current directory's children::

    ("projects", "py-term", "README.md")
      root → projects → py-term → README.md

Every lookup starts again from the root.  Nothing holds on to a node
between calls, so there is no cached state to go stale.
"""

from __future__ import annotations

from collections.abc import Sequence

from py_term.fs.nodes import Directory, File, Node


class PathTree:
    """A rooted tree whose root is always a directory.

    The root's own name is never part of a rendered path.
    """

    def __init__(self, root: Directory) -> None:
        """Create a tree around an already-built root directory.

        Args:
            root: The root node.  Use ``fs.seed.build_tree`` to build one
                  from plain data with invariant checks.

        Raises:
            TypeError: If *root* is not a ``Directory``.

        """
        if not isinstance(root, Directory):
            msg = f"Tree root must be a directory, got {type(root).__name__}"
            raise TypeError(msg)
        self._root = root

    @property
    def root(self) -> Directory:
        """Return the root directory."""
        return self._root

    def resolve(self, components: Sequence[str]) -> Node | None:
        """Walk *components* from the root and return the target node.

        An empty sequence resolves to the root.  Lookups are exact and
        case-sensitive.

        Returns:
            The node, or None if a component is missing or the walk
            would step into a file.

        """
        current: Node = self._root
        for name in components:
            match current:
                case File():
                    return None
                case Directory(children=children):
                    child = children.get(name)
                    if child is None:
                        return None
                    current = child
        return current
