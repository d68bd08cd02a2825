"""File tree subsystem — nodes, path resolution, and seed data.

Re-exports public symbols so callers can write::

    from py_term.fs import PathTree, build_tree
"""

from py_term.fs.nodes import Directory, File, Node, NodeKind
from py_term.fs.seed import TreeError, build_tree
from py_term.fs.tree import PathTree

__all__ = [
    "Directory",
    "File",
    "Node",
    "NodeKind",
    "PathTree",
    "TreeError",
    "build_tree",
]
