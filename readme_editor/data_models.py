"""Data models for repository metadata and configuration."""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RepositoryMetadata:
    """Normalized metadata describing a spec repository checkout."""

    name: str
    path: Path
    description: str
    exists: bool

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload representation."""
        return {
            "name": self.name,
            "path": str(self.path),
            "description": self.description,
            "exists": self.path.is_dir(),
        }


class RepositoryConfiguration:
    """Holds repository metadata and default resolution helpers.

    Loaded on first use from repositories.yaml.
    """

    def __init__(self, default_repository: str, repositories: dict[str, RepositoryMetadata]) -> None:
        self.default_repository = default_repository
        self.repositories = repositories

    def get(self, name: str) -> RepositoryMetadata:
        """Get repository metadata by name.

        Raises:
            ValueError: If the repository name is not found in configuration.
        """
        try:
            return self.repositories[name]
        except KeyError as exc:
            raise ValueError(f"Unknown repository '{name}'") from exc

    def as_payload(self) -> dict[str, Any]:
        return {
            "default": self.default_repository,
            "repositories": [repo.as_payload() for repo in self.repositories.values()],
        }
