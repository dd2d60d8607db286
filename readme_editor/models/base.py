"""Base Pydantic models for MCP tool input validation.

Base Models:
- BaseReadmeInput: Common validation for operations on a single readme
- validate_tag_name: Shared tag name check used by tag-related models
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, field_validator


def validate_tag_name(value: str) -> str:
    """Validate a tag name such as ``package-2024-01``.

    Raises:
        ValueError: If the tag is empty or contains whitespace.
    """
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(
            "Tag cannot be empty. "
            "Provide a tag name like 'package-2024-01'."
        )
    if any(char.isspace() for char in cleaned):
        raise ValueError(
            "Tag cannot contain whitespace. "
            f"Invalid tag: '{cleaned}'"
        )
    return cleaned


def validate_relative_path(value: str, label: str) -> str:
    """Validate a repository-relative, forward-slash path.

    Raises:
        ValueError: If the path is empty, absolute or contains '.'/'..' segments.
    """
    cleaned = value.strip().replace("\\", "/")
    if not cleaned:
        raise ValueError(f"{label} cannot be empty.")

    if cleaned.startswith("/"):
        raise ValueError(
            f"{label} must be relative to the repository root. "
            "Do not start with '/'. "
            f"Invalid value: '{cleaned}'"
        )

    parts = cleaned.split("/")
    if any(part in {".", ".."} for part in parts):
        raise ValueError(
            f"{label} cannot contain '.' or '..' path segments. "
            f"Invalid value: '{cleaned}'"
        )
    return cleaned.rstrip("/")


class BaseReadmeInput(BaseModel):
    """Base model for readme operations with common validation.

    All readme-related input models inherit from this class.
    """

    readme: str = Field(
        min_length=1,
        description=(
            "Readme path relative to the repository root. "
            "A folder resolves to the readme.md inside it. "
            "Examples: 'specification/network/resource-manager', "
            "'specification/network/resource-manager/readme.md'."
        ),
        examples=[
            "specification/network/resource-manager",
            "specification/storage/resource-manager/readme.md",
        ]
    )

    repository: Optional[str] = Field(
        None,
        description=(
            "Repository name (omit to use active repository). "
            "Use list_repositories() to discover available repositories."
        )
    )

    @field_validator('readme')
    @classmethod
    def validate_readme(cls, v: str) -> str:
        """Validate the readme identifier for safety and format."""
        return validate_relative_path(v, "Readme path")

    @field_validator('repository')
    @classmethod
    def validate_repository(cls, v: Optional[str]) -> Optional[str]:
        """Validate repository name format.

        Raises:
            ValueError: If repository name is an empty string
        """
        if v is not None and not v.strip():
            raise ValueError(
                "Repository name cannot be empty. "
                "Either omit the repository parameter to use the active repository, "
                "or provide a valid name from list_repositories()."
            )

        return v.strip() if v else None
