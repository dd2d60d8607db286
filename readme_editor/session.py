"""Session state management for active repository selection."""

from typing import Dict, Optional
from mcp.server.fastmcp import Context

from readme_editor.config import get_repository_configuration
from readme_editor.data_models import RepositoryMetadata

# Session state storage
_ACTIVE_REPOSITORIES: Dict[int, str] = {}


def get_session_key(ctx: Context) -> int:
    """Produce a stable per-session key for active repository tracking.

    The key is derived from the identity of the underlying session object and
    stays stable for the lifetime of the MCP session.
    """
    return id(ctx.session)


def set_active_repository(ctx: Context, repository_name: str) -> RepositoryMetadata:
    """Set the active repository for a client session.

    Raises:
        ValueError: If ``repository_name`` is not present in the configuration.
    """
    metadata = get_repository_configuration().get(repository_name)
    _ACTIVE_REPOSITORIES[get_session_key(ctx)] = metadata.name
    return metadata


def get_active_repository(ctx: Context) -> RepositoryMetadata:
    """Retrieve the active repository for a session, falling back to the default."""
    configuration = get_repository_configuration()
    name = _ACTIVE_REPOSITORIES.get(get_session_key(ctx), configuration.default_repository)
    return configuration.get(name)


def resolve_repository(repository: Optional[str], ctx: Optional[Context] = None) -> RepositoryMetadata:
    """Resolve which repository metadata should be used for an operation.

    Args:
        repository: Optional repository name provided directly by the caller.
        ctx: Optional FastMCP context used to infer the active repository when
            ``repository`` is not supplied.

    Raises:
        ValueError: If the supplied ``repository`` name is not recognized.
    """
    configuration = get_repository_configuration()
    if repository:
        return configuration.get(repository)

    if ctx is not None:
        return get_active_repository(ctx)

    return configuration.get(configuration.default_repository)
