"""MCP tools for repository management."""

import logging
from typing import Any
from mcp.server.fastmcp import Context

from readme_editor.server import mcp
from readme_editor.models import ListRepositoriesInput, SetActiveRepositoryInput
from readme_editor.config import get_repository_configuration
from readme_editor.session import (
    set_active_repository as set_active_repository_session,
    get_active_repository,
    get_session_key,
)

logger = logging.getLogger(__name__)


@mcp.tool()
async def list_repositories(
    input: ListRepositoriesInput,
    ctx: Context | None = None,
) -> dict[str, Any]:
    """List configured spec repositories and current session state.

    Returns:
        {
            "default": str,
            "active": str | None,
            "repositories": [{"name": str, "path": str, "description": str, "exists": bool}]
        }

    Error Handling:
        - Config file missing → Error with expected config path
        - Invalid config format → Error describing expected YAML structure
    """
    configuration = get_repository_configuration()
    active = None
    if ctx is not None:
        try:
            active = get_active_repository(ctx).name
        except ValueError:
            active = None

    return {
        "default": configuration.default_repository,
        "active": active,
        "repositories": [
            metadata.as_payload() for metadata in configuration.repositories.values()
        ],
    }


@mcp.tool()
async def set_active_repository(
    input: SetActiveRepositoryInput,
    ctx: Context,
) -> dict[str, Any]:
    """Set the active repository for this conversation session.

    Tool calls that omit the repository parameter use the active repository
    for the rest of the session.

    Returns:
        {"repository": str, "path": str, "status": "active"}

    Error Handling:
        - Unknown repository → ValueError, suggest list_repositories()
    """
    metadata = set_active_repository_session(ctx, input.repository)
    logger.info(
        "Active repository for session %s set to '%s'", get_session_key(ctx), metadata.name
    )
    return {
        "repository": metadata.name,
        "path": str(metadata.path),
        "status": "active",
    }
