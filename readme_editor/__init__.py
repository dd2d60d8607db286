"""Readme Editor MCP Server

Edits the YAML metadata blocks and tag sections of API specification readmes
via Model Context Protocol.
"""

from readme_editor.data_models import RepositoryMetadata, RepositoryConfiguration
from readme_editor.core.document import ReadmeDocument, parse_readme, parse_base64_readme, to_markdown
from readme_editor.core.readme_operations import (
    insert_tag_definition,
    splice_before_marker,
    update_field,
    update_latest_tag,
)
from readme_editor.core.tree_operations import code_blocks_by_heading
from readme_editor.session import resolve_repository, set_active_repository, get_active_repository
from readme_editor.server import mcp, run_server

# Import tools to register them with the MCP server
from readme_editor import tools  # noqa: F401

__version__ = "0.1.0"
__all__ = [
    "RepositoryMetadata",
    "RepositoryConfiguration",
    "ReadmeDocument",
    "parse_readme",
    "parse_base64_readme",
    "to_markdown",
    "code_blocks_by_heading",
    "update_field",
    "update_latest_tag",
    "splice_before_marker",
    "insert_tag_definition",
    "resolve_repository",
    "set_active_repository",
    "get_active_repository",
    "mcp",
    "run_server",
]
