"""Nodes of the virtual file tree — directories and files.

The terminal shows a small, read-only file tree (think of a portfolio
site: ``/projects``, ``about.md``, ``contact.md``).  Every entry in that
tree is one of exactly two kinds:

- **Directory** — a named container mapping child names to nodes.
- **File** — a named leaf carrying text content, plus an optional
  title and url the UI can use to render a link card.

``Node`` is a closed union of the two, so every traversal can ``match``
on the concrete class and handle both cases.  The ``kind`` tag mirrors
the class for callers that serialise nodes (see ``fs/seed.py``).

Unlike an inode table, names live on the node itself *and* as the key
in the parent's ``children`` mapping.  The tree builder checks that the
two always agree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias


class NodeKind(StrEnum):
    """The kind of object a node represents."""

    DIRECTORY = "dir"
    FILE = "file"


@dataclass(frozen=True)
class File:
    """A leaf node with text content.

    Attributes:
        name: The file name (never contains ``/``).
        content: The text shown by ``cat``.
        title: Optional heading for rich rendering.
        url: Optional link target for rich rendering.

    """

    name: str
    content: str = ""
    title: str = ""
    url: str = ""

    @property
    def kind(self) -> NodeKind:
        """Return the node tag."""
        return NodeKind.FILE


@dataclass(frozen=True)
class Directory:
    """A container node.

    ``children`` keeps insertion order, which is the order ``ls`` shows.
    The mapping is owned by this directory and never mutated after the
    tree is built.
    """

    name: str
    children: dict[str, Node] = field(default_factory=lambda: {})  # noqa: PIE807

    @property
    def kind(self) -> NodeKind:
        """Return the node tag."""
        return NodeKind.DIRECTORY


Node: TypeAlias = Directory | File
