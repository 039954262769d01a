"""Text drawings of binary trees, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.node import Node

_MIN_WIDTH = 255


def _label(node: Node) -> str:
    return f"({node.value:03d})"


def _total_width(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return len(_label(node)) + _total_width(node.left) + _total_width(node.right)


def _draw(node: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw ``node`` into ``rows`` starting at column ``offset``; return its width."""
    if node is None:
        return 0
    parent = node.parent
    is_left = parent is not None and parent.left is node
    label = _label(node)
    width = len(label)
    left = _draw(node.left, offset, depth + 1, rows)
    right = _draw(node.right, offset + left + width, depth + 1, rows)
    start = offset + left
    rows[depth][start:start + width] = label
    if depth:
        above = rows[depth - 1]
        if is_left:
            first = start + width // 2
            above[first:first + width + right] = "-" * (width + right)
        else:
            first = offset - width // 2
            above[first:first + left + width] = "-" * (left + width)
        above[start + width // 2] = "."
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of ``tree``, each level ending in a newline.

    An empty tree draws as the empty string.
    """
    if tree is None:
        return ""
    width = max(_MIN_WIDTH, _total_width(tree) + 1)
    rows = [[" "] * width for _ in range(tree.height() + 1)]
    _draw(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        trimmed = text.rstrip(" ")
        if len(trimmed) < 2:
            trimmed = text[:2]
        lines.append(trimmed + "\n")
    return "".join(lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))