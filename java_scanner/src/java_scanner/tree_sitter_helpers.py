# --- Tree-sitter plumbing ----------------------------------------------------
from typing import Iterator, Optional

from tree_sitter import Node


def node_text(source_bytes: bytes, node) -> str:
    """
    Converts a node's [start_byte:end_byte] into the corresponding string.
    Tree-sitter nodes only store byte offsets, so we slice the original source.
    """
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def node_point(node) -> tuple[int, int]:
    """
    Returns the (line, column) of a node's start in 0-based coordinates.
    Handy for pointing at where a syntax error was found.
    """
    return (node.start_point[0], node.start_point[1])


def child_of_type(node: Node, *types: str) -> Optional[Node]:
    """First direct child whose type is one of `types`, or None."""
    for child in node.children:
        if child.type in types:
            return child
    return None


def children_of_type(node: Node, *types: str) -> Iterator[Node]:
    for child in node.children:
        if child.type in types:
            yield child


def first_error_node(root: Node) -> Optional[Node]:
    """
    Pre-order search for the first ERROR or MISSING node. Only descends into
    subtrees that report has_error.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None
