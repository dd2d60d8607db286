"""Parsed readme documents and their lossless re-serialization.

A :class:`ReadmeDocument` keeps the original text next to the markdown-it
syntax tree. Edits are made by replacing the literal of a code block node in
place; :func:`to_markdown` then copies the original text line for line and
only re-renders the content lines of blocks whose literal changed, so fence
markers, info strings, container prefixes and line endings survive untouched.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from dataclasses import dataclass, field

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from readme_editor.core.tree_operations import code_block_nodes
from readme_editor.errors import ReadmeDecodeError

logger = logging.getLogger(__name__)

# Same line terminators markdown-it normalizes before computing line maps
LINE_PATTERN = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+$")
LINE_ENDING_PATTERN = re.compile(r"(\r\n|\r|\n)$")


@dataclass
class ReadmeDocument:
    """A readme parsed into a syntax tree, plus what is needed to write it back."""

    source: str
    tree: SyntaxTreeNode
    originals: list[tuple[SyntaxTreeNode, str]] = field(default_factory=list, repr=False)


# ==============================================================================
# PARSING
# ==============================================================================


def parse_readme(text: str) -> ReadmeDocument:
    """Parse markdown text into a :class:`ReadmeDocument`."""
    tree = SyntaxTreeNode(MarkdownIt("commonmark").parse(text))
    originals = [(node, get_literal(node)) for node in code_block_nodes(tree)]
    return ReadmeDocument(source=text, tree=tree, originals=originals)


def parse_base64_readme(payload: str | bytes) -> ReadmeDocument:
    """Decode base64 readme content (as served by the GitHub contents API) and parse it.

    Raises:
        ReadmeDecodeError: If the payload is not base64 or not UTF-8 once decoded.
    """
    try:
        text = base64.b64decode(payload).decode("utf-8")
    except (binascii.Error, ValueError) as exc:
        logger.error("Could not decode base64 readme payload: %s", exc)
        raise ReadmeDecodeError(f"Readme payload is not valid base64 UTF-8 text: {exc}") from exc
    return parse_readme(text)


# ==============================================================================
# NODE LITERALS
# ==============================================================================


def get_literal(node: SyntaxTreeNode) -> str:
    """Return the raw text payload of a leaf node (code blocks, text runs)."""
    token = node.token
    if token is None:
        return ""
    return token.content


def set_literal(node: SyntaxTreeNode, text: str) -> None:
    """Replace the raw text payload of a leaf node in place."""
    token = node.token
    if token is None:
        raise ValueError(f"Node of type '{node.type}' has no literal to replace.")
    token.content = text


# ==============================================================================
# SERIALIZATION
# ==============================================================================


def _count_lines(text: str) -> int:
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def _strip_line_ending(line: str) -> str:
    return LINE_ENDING_PATTERN.sub("", line)


def _line_ending(line: str) -> str:
    match = LINE_ENDING_PATTERN.search(line)
    return match.group(1) if match else "\n"


def _content_prefix(node: SyntaxTreeNode, lines: list[str], first: int, original: str) -> str:
    """Work out what precedes each content line of a block in the source.

    This covers blockquote markers, list indentation and fence indentation.
    The first content line is compared with the literal it produced; when that
    line is blank the prefix is derived from the opening fence instead.
    """
    first_literal_line = original.split("\n", 1)[0]
    if first < len(lines) and first_literal_line:
        source_line = _strip_line_ending(lines[first])
        if source_line.endswith(first_literal_line):
            return source_line[: len(source_line) - len(first_literal_line)]

    # Only fences get here: an indented block always starts with a non-blank line
    opening = _strip_line_ending(lines[node.map[0]])
    marker_at = opening.find(node.markup) if node.markup else -1
    head = opening[:marker_at] if marker_at > 0 else ""
    # List markers become indentation on continuation lines; '>' markers repeat
    return re.sub(r"[^\s>]", " ", head)


def _render_content(literal: str, prefix: str, newline: str) -> list[str]:
    rendered = []
    for line in literal.split("\n")[: _count_lines(literal)]:
        rendered.append((prefix + line if line else prefix.rstrip()) + newline)
    return rendered


def to_markdown(document: ReadmeDocument) -> str:
    """Convert a (possibly edited) document back to markdown text.

    Every code block whose literal differs from the parsed original has its
    content lines re-rendered; everything else is copied from the source.
    """
    changed = [
        (node, original)
        for node, original in document.originals
        if get_literal(node) != original
    ]
    if not changed:
        return document.source

    lines = LINE_PATTERN.findall(document.source)
    # Blocks are in document order; splice bottom-up so earlier line numbers stay valid
    for node, original in reversed(changed):
        start = node.map[0]
        first = start + 1 if node.type == "fence" else start
        last = first + _count_lines(original)
        prefix = _content_prefix(node, lines, first, original)
        newline = _line_ending(lines[start]) if start < len(lines) else "\n"
        lines[first:last] = _render_content(get_literal(node), prefix, newline)

    return "".join(lines)
