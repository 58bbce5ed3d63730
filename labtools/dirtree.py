"""Build and print a recursive listing of a directory."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

DIR_MARK = "d"
FILE_MARK = "."


@dataclass
class TreeNode:
    """One entry of a directory listing, with its children if it is a directory."""

    path: str
    is_dir: bool
    children: list[TreeNode] = field(default_factory=list)

    @property
    def kind(self) -> str:
        """The type column: ``d`` for a directory, ``.`` otherwise."""
        return DIR_MARK if self.is_dir else FILE_MARK

    def walk(self) -> Iterator[tuple[int, TreeNode]]:
        """Yield ``(depth, node)`` for this node and its descendants, pre-order."""
        stack = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, child) for child in reversed(node.children))


def _identity(path: str) -> tuple[int, int] | None:
    try:
        st = os.stat(path)
    except OSError:
        return None
    return st.st_dev, st.st_ino


def _list(dirname: str, ancestors: frozenset) -> list[TreeNode]:
    try:
        names = sorted(os.listdir(dirname))
    except OSError:
        return []

    nodes = []
    for name in names:
        full = f"{dirname}/{name}"
        node = TreeNode(full, os.path.isdir(full))
        if node.is_dir:
            key = _identity(full)
            # A directory reached again through a link is shown but not entered.
            if key is not None and key not in ancestors:
                node.children = _list(full, ancestors | {key})
        nodes.append(node)
    return nodes


def list_dirs(dirname: str | os.PathLike) -> list[TreeNode]:
    """Return the entries of ``dirname``, recursively; an unreadable directory gives []."""
    root = os.fspath(dirname)
    key = _identity(root)
    return _list(root, frozenset() if key is None else frozenset({key}))


def render_tree(nodes: Sequence[TreeNode]) -> str:
    """Render nodes as a two-column table of type and indented path."""
    lines = ["Type\tName"]
    for root in nodes:
        for depth, node in root.walk():
            lines.append(f"{node.kind}\t{'  ' * depth}{node.path}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tree of the given directory, or of the current one."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("Usage: dirtree [directory]", file=sys.stderr)
        return 1
    dirname = args[0] if args else os.getcwd()
    print(render_tree(list_dirs(dirname)))
    return 0


if __name__ == "__main__":
    sys.exit(main())