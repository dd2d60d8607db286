"""Readme metadata MCP tools.

This module provides MCP tool wrappers for readme operations:
- List YAML code blocks by heading
- Read the latest tag
- Set the latest tag
- Add a new tag definition

All tools delegate to core operations in readme_editor.core.readme_file_operations.
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import Context

from readme_editor.server import mcp
from readme_editor.session import resolve_repository
from readme_editor.models import (
    ReadCodeBlocksInput,
    ReadLatestTagInput,
    SetLatestTagInput,
    AddTagDefinitionInput,
)
from readme_editor.core.readme_file_operations import (
    list_readme_code_blocks as list_code_blocks_operation,
    read_latest_tag,
    set_latest_tag,
    add_tag_definition,
)


# ==============================================================================
# READ OPERATIONS
# ==============================================================================

@mcp.tool()
async def list_readme_code_blocks(
    input: ReadCodeBlocksInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """List the code blocks of a readme keyed by the heading that owns them.

    A block belongs to the nearest heading before it at its own level or at
    any enclosing level. When two headings share a title the later block wins.

    Args:
        input (ReadCodeBlocksInput): Validated input containing:
            - readme (str): Readme path or folder, relative to the repository
            - repository (str, optional): Target repository (omit to use active)

    Returns:
        {
            "repository": str,
            "readme": str,
            "path": str,
            "code_blocks": [{"heading": str, "info": str, "line": int,
                             "yaml": dict | None, "literal": str}],
            "status": "read"
        }

    Error Handling:
        - ValidationError: Empty path, absolute path or '..' segments
        - Readme not found → FileNotFoundError
    """
    metadata = resolve_repository(input.repository, ctx)
    return list_code_blocks_operation(metadata, input.readme)


@mcp.tool()
async def read_readme_latest_tag(
    input: ReadLatestTagInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Read the latest tag recorded under the 'Basic Information' heading.

    Returns:
        {"repository": str, "readme": str, "path": str, "tag": str | None, "status": "read"}

    Error Handling:
        - No 'Basic Information' code block → ValueError
        - Block is not a YAML mapping → ValueError
    """
    metadata = resolve_repository(input.repository, ctx)
    return read_latest_tag(metadata, input.readme)


# ==============================================================================
# WRITE OPERATIONS
# ==============================================================================

# Rewrites only the YAML block under 'Basic Information'; the rest of the file is
# left byte-for-byte intact.
@mcp.tool()
async def set_readme_latest_tag(
    input: SetLatestTagInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Point the 'Basic Information' block of a readme at a tag.

    Args:
        input (SetLatestTagInput): Validated input containing:
            - readme (str): Readme path or folder
            - tag (str): New latest tag, e.g. "package-2024-01"
            - repository (str, optional): Target repository

    Returns:
        {
            "repository": str,
            "readme": str,
            "path": str,
            "previous_tag": str | None,
            "tag": str,
            "status": "updated" | "unchanged"
        }

    Error Handling:
        - No 'Basic Information' code block → ValueError
        - Block is not a YAML mapping → ValueError, file untouched
    """
    metadata = resolve_repository(input.repository, ctx)
    return set_latest_tag(metadata, input.readme, input.tag)


@mcp.tool()
async def add_readme_tag_definition(
    input: AddTagDefinitionInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """Insert a new '### Tag' section above the existing tag sections.

    Args:
        input (AddTagDefinitionInput): Validated input containing:
            - readme (str): Readme path or folder
            - tag (str): New tag name
            - input_files (list[str]): Files listed under 'input-file'
            - set_latest (bool): Also make the new tag the latest one
            - repository (str, optional): Target repository

    Returns:
        {"repository": str, "readme": str, "path": str, "tag": str,
         "input_files": list[str], "latest": bool, "status": "tag_added"}

    Error Handling:
        - Readme has no '### Tag' section → ValueError
        - Tag already defined → ValueError
    """
    metadata = resolve_repository(input.repository, ctx)
    return add_tag_definition(
        metadata,
        input.readme,
        input.tag,
        input.input_files,
        set_latest=input.set_latest,
    )
