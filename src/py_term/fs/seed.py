"""Seed data — build a path tree from plain dictionaries.

The tree is described once, at startup, as nested JSON-compatible data::

    {
        "name": "",
        "type": "dir",
        "children": {
            "about.md": {"name": "about.md", "type": "file", "content": "..."}
        }
    }

``build_tree`` turns that into ``Directory``/``File`` nodes and checks
the tree invariants along the way.  Reading the JSON itself is the
bootloader's job; the tree is read-only for the lifetime of the process.
"""

from __future__ import annotations

from typing import Any

from py_term.fs.nodes import Directory, File, Node, NodeKind


class TreeError(ValueError):
    """Raise when seed data does not describe a well-formed tree."""


def _build_node(data: Any, where: str) -> Node:
    """Build a single node (recursively for directories)."""
    if not isinstance(data, dict):
        msg = f"{where}: expected an object, got {type(data).__name__}"
        raise TreeError(msg)

    name = data.get("name")
    if not isinstance(name, str):
        msg = f"{where}: missing or non-string 'name'"
        raise TreeError(msg)
    if "/" in name:
        msg = f"{where}: name {name!r} contains '/'"
        raise TreeError(msg)

    try:
        kind = NodeKind(data.get("type"))
    except ValueError:
        msg = f"{where}: unknown node type {data.get('type')!r}"
        raise TreeError(msg) from None

    if kind is NodeKind.FILE:
        return File(
            name=name,
            content=str(data.get("content", "")),
            title=str(data.get("title", "")),
            url=str(data.get("url", "")),
        )

    raw_children = data.get("children", {})
    if not isinstance(raw_children, dict):
        msg = f"{where}: 'children' must be an object"
        raise TreeError(msg)

    children: dict[str, Node] = {}
    for key, child_data in raw_children.items():
        if not key:
            msg = f"{where}: empty child name"
            raise TreeError(msg)
        child = _build_node(child_data, f"{where.rstrip('/')}/{key}")
        if child.name != key:
            msg = f"{where}: key {key!r} does not match child name {child.name!r}"
            raise TreeError(msg)
        children[key] = child
    return Directory(name=name, children=children)


def build_tree(data: dict[str, Any]) -> Directory:
    """Build and validate a root directory from plain data.

    Args:
        data: The root node description (``"type"`` must be ``"dir"``).

    Returns:
        The root ``Directory``.

    Raises:
        TreeError: If any node is malformed, a child key disagrees with
            the child's name, a name contains ``/``, or the root is not
            a directory.

    """
    root = _build_node(data, "/")
    if not isinstance(root, Directory):
        msg = "/: the root must be a directory"
        raise TreeError(msg)
    return root

