"""Readme operations on files inside configured repositories."""

from __future__ import annotations

import logging
import re
from typing import Any

from readme_editor.constants import LATEST_HEADING, TAG_FIELD, TAG_MARKER
from readme_editor.core.document import get_literal, parse_readme
from readme_editor.core.readme_operations import (
    insert_tag_definition,
    load_yaml_mapping,
    read_field,
    update_latest_tag,
)
from readme_editor.core.repository_operations import (
    load_readme,
    readme_display_name,
    write_readme,
)
from readme_editor.core.tree_operations import code_blocks_by_heading
from readme_editor.data_models import RepositoryMetadata
from readme_editor.errors import YamlDecodeError

logger = logging.getLogger(__name__)


def _has_tag_section(text: str, tag: str) -> bool:
    pattern = re.compile(rf"^\s*{re.escape(TAG_MARKER)}:\s*{re.escape(tag)}\s*$", re.MULTILINE)
    return pattern.search(text) is not None


def list_readme_code_blocks(repository: RepositoryMetadata, readme: str) -> dict[str, Any]:
    """List the code blocks of a readme keyed by their owning heading.

    Returns:
        Dictionary with repository, readme, path, status and ``code_blocks``: a list
        of ``{"heading", "info", "line", "yaml"}`` entries. ``yaml`` is ``None``
        when the block is not a YAML mapping.
    """
    target_path, text = load_readme(repository, readme)
    document = parse_readme(text)
    index = code_blocks_by_heading(document.tree)

    entries = []
    for heading, block in index.items():
        try:
            decoded: dict[str, Any] | None = load_yaml_mapping(block, heading)
        except YamlDecodeError:
            decoded = None
        entries.append(
            {
                "heading": heading,
                "info": block.info.strip() if block.type == "fence" else "",
                "line": block.map[0] + 1,
                "yaml": decoded,
                "literal": get_literal(block),
            }
        )

    readme_name = readme_display_name(repository, target_path)
    logger.info(
        "Indexed %d code blocks in readme '%s' (repository '%s')",
        len(entries),
        readme_name,
        repository.name,
    )
    return {
        "repository": repository.name,
        "readme": readme_name,
        "path": str(target_path),
        "code_blocks": entries,
        "status": "read",
    }


def read_latest_tag(repository: RepositoryMetadata, readme: str) -> dict[str, Any]:
    """Read the ``tag`` field of the ``Basic Information`` block."""
    target_path, text = load_readme(repository, readme)
    tag = read_field(parse_readme(text), LATEST_HEADING, TAG_FIELD)
    readme_name = readme_display_name(repository, target_path)
    logger.info("Read latest tag '%s' from readme '%s'", tag, readme_name)
    return {
        "repository": repository.name,
        "readme": readme_name,
        "path": str(target_path),
        "tag": tag,
        "status": "read",
    }


def set_latest_tag(repository: RepositoryMetadata, readme: str, tag: str) -> dict[str, Any]:
    """Point the ``Basic Information`` block of a readme at ``tag``.

    Returns:
        Dictionary with repository, readme, path, previous_tag, tag and a status of
        ``updated`` or ``unchanged``.

    Raises:
        FileNotFoundError: If the readme does not exist.
        HeadingNotIndexedError: If the readme has no ``Basic Information`` block.
        YamlDecodeError: If that block is not a YAML mapping.
    """
    target_path, text = load_readme(repository, readme)
    document = parse_readme(text)
    previous_tag = read_field(document, LATEST_HEADING, TAG_FIELD)
    readme_name = readme_display_name(repository, target_path)

    if previous_tag == tag:
        logger.info(
            "Latest tag update skipped for readme '%s' in repository '%s' (already '%s')",
            readme_name,
            repository.name,
            tag,
        )
        status = "unchanged"
    else:
        write_readme(target_path, update_latest_tag(document, tag))
        logger.info(
            "Latest tag for readme '%s' in repository '%s' changed from '%s' to '%s'",
            readme_name,
            repository.name,
            previous_tag,
            tag,
        )
        status = "updated"

    return {
        "repository": repository.name,
        "readme": readme_name,
        "path": str(target_path),
        "previous_tag": previous_tag,
        "tag": tag,
        "status": status,
    }


def add_tag_definition(
    repository: RepositoryMetadata,
    readme: str,
    tag: str,
    input_files: list[str],
    set_latest: bool = False,
) -> dict[str, Any]:
    """Insert a new ``### Tag`` section above the existing ones.

    Args:
        repository: Repository metadata.
        readme: Readme identifier.
        tag: Name of the new tag.
        input_files: Swagger files listed under ``input-file``.
        set_latest: Also make ``tag`` the latest tag in ``Basic Information``.

    Raises:
        ValueError: If a section for ``tag`` already exists.
        MarkerNotFoundError: If the readme has no ``### Tag`` section to insert before.
    """
    target_path, text = load_readme(repository, readme)
    readme_name = readme_display_name(repository, target_path)

    if _has_tag_section(text, tag):
        raise ValueError(f"Readme '{readme_name}' already defines tag '{tag}'.")

    updated = insert_tag_definition(text, input_files, tag)
    if set_latest:
        updated = update_latest_tag(parse_readme(updated), tag)

    write_readme(target_path, updated)
    logger.info(
        "Added tag '%s' with %d input files to readme '%s' in repository '%s' (latest=%s)",
        tag,
        len(input_files),
        readme_name,
        repository.name,
        set_latest,
    )
    return {
        "repository": repository.name,
        "readme": readme_name,
        "path": str(target_path),
        "tag": tag,
        "input_files": list(input_files),
        "latest": set_latest,
        "status": "tag_added",
    }
