"""Small helpers over tree-sitter nodes."""

from __future__ import annotations

from collections.abc import Iterator


def node_text(node) -> str:
    return node.text.decode("utf-8", errors="replace")


def walk(node) -> Iterator:
    """Yield *node* and all its descendants in source (pre-)order.

    Uses an explicit stack so deeply nested JSX cannot exhaust the
    interpreter's recursion limit.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def first_error_line(root) -> int | None:
    """1-indexed line of the first ERROR or missing node, if any."""
    for node in walk(root):
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
    return None
