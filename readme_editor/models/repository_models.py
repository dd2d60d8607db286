"""Pydantic input models for repository management operations."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ListRepositoriesInput(BaseModel):
    """Input model for list_repositories tool.

    Takes no parameters; the model keeps every tool on the same calling convention.
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [{}]
        }


class SetActiveRepositoryInput(BaseModel):
    """Input model for set_active_repository tool.

    Examples:
        >>> SetActiveRepositoryInput(repository="specs")
    """

    repository: str = Field(
        min_length=1,
        description=(
            "Repository name from repositories.yaml configuration. "
            "Use list_repositories() to discover valid names."
        ),
        examples=["specs", "specs-pr"]
    )

    @field_validator('repository')
    @classmethod
    def validate_repository(cls, v: str) -> str:
        """Validate repository name format.

        Raises:
            ValueError: If repository name is empty or only whitespace
        """
        cleaned = v.strip()

        if not cleaned:
            raise ValueError(
                "Repository name cannot be empty. "
                "Use list_repositories() to see available repositories."
            )

        return cleaned

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"repository": "specs"}
            ]
        }
