"""Traversal helpers that associate code blocks with their owning headings."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Optional

from markdown_it.tree import SyntaxTreeNode

# ``fence`` is a backtick/tilde block, ``code_block`` an indented one
CODE_BLOCK_TYPES = frozenset({"fence", "code_block"})


def is_code_block(node: SyntaxTreeNode) -> bool:
    return node.type in CODE_BLOCK_TYPES


def walk_to_node(
    cursor: Iterator[SyntaxTreeNode],
    predicate: Callable[[SyntaxTreeNode], bool],
) -> Optional[SyntaxTreeNode]:
    """Advance ``cursor`` until ``predicate`` holds for a node.

    Args:
        cursor: Pre-order iterator over a tree, usually ``node.walk()``. It is
            consumed up to and including the returned node, so repeated calls
            with the same cursor continue where the previous one stopped.
        predicate: Test applied to every node the cursor yields.

    Returns:
        The first matching node, or ``None`` once the cursor is exhausted.
    """
    for node in cursor:
        if predicate(node):
            return node
    return None


def node_heading(node: SyntaxTreeNode) -> Optional[SyntaxTreeNode]:
    """Find the heading that owns ``node``.

    Headings are siblings that precede their content at some ancestor level,
    so the search steps to the previous sibling when there is one and to the
    parent otherwise, until a heading is reached.

    Returns:
        The owning heading node, or ``None`` when the climb reaches the root
        without passing a heading.
    """
    current: Optional[SyntaxTreeNode] = node
    while current is not None and current.type != "heading":
        previous = current.previous_sibling
        current = previous if previous is not None else current.parent
    return current


def heading_literal(heading: SyntaxTreeNode) -> str:
    """Return the first text run inside ``heading`` (empty string if none)."""
    text_node = walk_to_node(heading.walk(), lambda n: n.type == "text")
    if text_node is None:
        return ""
    return text_node.content or ""


def code_block_nodes(root: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    """Collect every code block under ``root`` in document order."""
    cursor = root.walk()
    blocks: list[SyntaxTreeNode] = []
    while True:
        block = walk_to_node(cursor, is_code_block)
        if block is None:
            break
        blocks.append(block)
    return blocks


def code_blocks_by_heading(root: SyntaxTreeNode) -> dict[str, SyntaxTreeNode]:
    """Map heading text to the code block that heading owns.

    Blocks without an owning heading, or whose heading has no text, are left
    out. When several blocks resolve to the same heading text the one that
    appears last in the document wins.
    """
    index: dict[str, SyntaxTreeNode] = {}
    for block in code_block_nodes(root):
        heading = node_heading(block)
        if heading is None:
            continue

        title = heading_literal(heading)
        if not title:
            continue

        index[title] = block
    return index
