"""Configuration loading and repository registry."""

import logging
from functools import lru_cache
from pathlib import Path
import yaml

from readme_editor.constants import CONFIG_PATH
from readme_editor.data_models import RepositoryMetadata, RepositoryConfiguration

logger = logging.getLogger(__name__)


def load_repository_configuration(config_path: Path = CONFIG_PATH) -> RepositoryConfiguration:
    """Load and validate the repository configuration file.

    Args:
        config_path: Path to the YAML configuration file. Defaults to
            ``repositories.yaml`` at the project root, or ``$README_EDITOR_CONFIG``.

    Returns:
        A fully populated :class:`RepositoryConfiguration` containing normalized
        repository metadata and the configured default repository name.

    Raises:
        FileNotFoundError: If the configuration file is missing.
        ValueError: If the file exists but does not provide the expected structure
            (missing default, empty mapping, invalid entries, etc.).
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Repository configuration file not found at {config_path}")

    try:
        raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Repository configuration is not valid YAML: {exc}") from exc

    repositories_section = raw_config.get("repositories") if isinstance(raw_config, dict) else None
    if not isinstance(repositories_section, dict) or not repositories_section:
        raise ValueError("Repository configuration must include a non-empty 'repositories' mapping")

    processed: dict[str, RepositoryMetadata] = {}
    for name, entry in repositories_section.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Repository '{name}' must map to a dictionary of settings")

        raw_path = entry.get("path")
        if not isinstance(raw_path, str) or not raw_path.strip():
            raise ValueError(f"Repository '{name}' is missing a valid 'path' string")

        resolved_path = Path(raw_path).expanduser().resolve(strict=False)
        description = (entry.get("description") or "").strip()

        processed[name] = RepositoryMetadata(
            name=name,
            path=resolved_path,
            description=description,
            exists=resolved_path.is_dir(),
        )

    default_repository = raw_config.get("default")
    if not isinstance(default_repository, str) or default_repository not in processed:
        raise ValueError(
            "Repository configuration must specify a 'default' repository present in the mapping"
        )

    logger.info("Loaded %d repositories from %s", len(processed), config_path)
    return RepositoryConfiguration(default_repository=default_repository, repositories=processed)


@lru_cache(maxsize=1)
def get_repository_configuration() -> RepositoryConfiguration:
    """Return the configuration, loading it on first use."""
    return load_repository_configuration()
