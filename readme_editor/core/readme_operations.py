"""Structural and textual edits applied to readme documents.

Two techniques live side by side here. Field updates work on the parsed tree:
the YAML code block owned by a heading is decoded, changed and written back
into its node. New tag sections are spliced into the raw text in front of the
first ``### Tag`` marker, because the version history is plain markdown the
tree has no structured handle on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import yaml
from markdown_it.tree import SyntaxTreeNode

from readme_editor.constants import (
    INPUT_FILE_FIELD,
    LATEST_HEADING,
    TAG_FIELD,
    TAG_MARKER,
)
from readme_editor.core.document import (
    ReadmeDocument,
    get_literal,
    set_literal,
    to_markdown,
)
from readme_editor.core.readme_builder import build_version_definition, dump_yaml
from readme_editor.core.tree_operations import code_blocks_by_heading
from readme_editor.errors import (
    HeadingNotIndexedError,
    MarkerNotFoundError,
    YamlDecodeError,
)

logger = logging.getLogger(__name__)

VersionDefinitionBuilder = Callable[[dict[str, Any], str], str]


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _lookup_block(index: dict[str, SyntaxTreeNode], heading: str) -> SyntaxTreeNode:
    try:
        return index[heading]
    except KeyError:
        logger.error("No code block indexed under heading '%s'", heading)
        raise HeadingNotIndexedError(heading) from None


def load_yaml_mapping(node: SyntaxTreeNode, heading: str) -> dict[str, Any]:
    """Decode the YAML literal of ``node`` into a mapping.

    Raises:
        YamlDecodeError: If the literal is not valid YAML or is not a mapping.
    """
    try:
        decoded = yaml.safe_load(get_literal(node))
    except yaml.YAMLError as exc:
        logger.error("Couldn't parse code block under heading '%s': %s", heading, exc)
        raise YamlDecodeError(
            f"Code block under heading '{heading}' contains invalid YAML: {exc}"
        ) from exc

    if not isinstance(decoded, dict):
        logger.error("Couldn't parse code block under heading '%s' as a mapping", heading)
        raise YamlDecodeError(f"Code block under heading '{heading}' is not a YAML mapping.")
    return decoded


# ==============================================================================
# TREE EDITS
# ==============================================================================


def read_field(document: ReadmeDocument, heading: str, field: str = TAG_FIELD) -> Any:
    """Return ``field`` from the YAML block owned by ``heading`` (``None`` if unset)."""
    index = code_blocks_by_heading(document.tree)
    block = _lookup_block(index, heading)
    return load_yaml_mapping(block, heading).get(field)


def update_field(
    document: ReadmeDocument,
    index: dict[str, SyntaxTreeNode],
    heading: str,
    value: Any,
    field: str = TAG_FIELD,
) -> str:
    """Set ``field`` in the YAML block owned by ``heading`` and re-emit the document.

    The code block node inside ``document.tree`` is modified in place. Other
    keys of the mapping are kept; the block is re-dumped as a whole, so YAML
    comments and quoting are normalized.

    Args:
        document: Parsed readme that owns the nodes in ``index``.
        index: Heading-to-code-block mapping built from ``document.tree``.
        heading: Heading text whose block should change.
        value: New value for ``field``.
        field: Mapping key to set. Defaults to ``tag``.

    Returns:
        The complete readme text after the edit.

    Raises:
        HeadingNotIndexedError: If ``heading`` has no indexed code block.
        YamlDecodeError: If the block is not a YAML mapping. The tree is left
            untouched in that case.
    """
    block = _lookup_block(index, heading)
    definition = load_yaml_mapping(block, heading)
    definition[field] = value
    set_literal(block, dump_yaml(definition))
    return to_markdown(document)


def update_latest_tag(document: ReadmeDocument, new_tag: str) -> str:
    """Point the ``Basic Information`` block at ``new_tag``."""
    index = code_blocks_by_heading(document.tree)
    return update_field(document, index, LATEST_HEADING, new_tag)


# ==============================================================================
# TEXT SPLICES
# ==============================================================================


def splice_before_marker(text: str, marker: str, insertion: str) -> str:
    """Insert ``insertion`` right before the first occurrence of ``marker``.

    Raises:
        MarkerNotFoundError: If ``marker`` does not occur in ``text``.
    """
    position = text.find(marker)
    if position == -1:
        logger.error("Insertion marker '%s' not found", marker)
        raise MarkerNotFoundError(marker)
    return text[:position] + insertion + text[position:]


def create_tag_definition_yaml(files: list[str]) -> dict[str, list[str]]:
    return {INPUT_FILE_FIELD: list(files)}


def insert_tag_definition(
    readme_text: str,
    tag_files: list[str],
    new_tag: str,
    builder: VersionDefinitionBuilder = build_version_definition,
) -> str:
    """Add a tag section for ``new_tag`` above the existing tag sections.

    Args:
        readme_text: Raw readme text.
        tag_files: Input files the new tag covers.
        new_tag: Tag name, e.g. ``package-2024-01``.
        builder: Renders the section text from the definition and tag name.

    Returns:
        The readme text with the rendered section placed before ``### Tag``.
    """
    definition = create_tag_definition_yaml(tag_files)
    section = builder(definition, new_tag)
    return splice_before_marker(readme_text, TAG_MARKER, section)
