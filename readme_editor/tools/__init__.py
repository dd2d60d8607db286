"""MCP tool definitions for readme editing.

Importing the submodules registers their @mcp.tool() decorated functions.
"""

from readme_editor.tools import repository_tools
from readme_editor.tools import readme_tools

__all__ = [
    "repository_tools",
    "readme_tools",
]
