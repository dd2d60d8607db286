"""Pydantic input models for readme operations.

This module defines input models for readme metadata management:
- List code blocks indexed by heading
- Read the latest tag
- Set the latest tag
- Add a new tag definition
"""

from __future__ import annotations

from pydantic import Field, field_validator

from .base import BaseReadmeInput, validate_relative_path, validate_tag_name


class ReadCodeBlocksInput(BaseReadmeInput):
    """Input model for list_readme_code_blocks tool.

    Examples:
        >>> ReadCodeBlocksInput(readme="specification/network/resource-manager")
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"readme": "specification/network/resource-manager", "repository": None}
            ]
        }


class ReadLatestTagInput(BaseReadmeInput):
    """Input model for read_readme_latest_tag tool."""

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"readme": "specification/network/resource-manager", "repository": "specs"}
            ]
        }


class SetLatestTagInput(BaseReadmeInput):
    """Input model for set_readme_latest_tag tool.

    Examples:
        >>> SetLatestTagInput(readme="specification/network/resource-manager", tag="package-2024-01")
    """

    tag: str = Field(
        min_length=1,
        description="Tag to record under 'Basic Information'. Example: 'package-2024-01'.",
        examples=["package-2024-01", "package-preview-2024-03"]
    )

    @field_validator('tag')
    @classmethod
    def validate_tag(cls, v: str) -> str:
        return validate_tag_name(v)

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "readme": "specification/network/resource-manager",
                    "tag": "package-2024-01",
                    "repository": None
                }
            ]
        }


class AddTagDefinitionInput(BaseReadmeInput):
    """Input model for add_readme_tag_definition tool.

    Inserts a new '### Tag' section above the existing ones, optionally making
    it the latest tag as well.
    """

    tag: str = Field(
        min_length=1,
        description="Name of the new tag. Example: 'package-2024-01'.",
        examples=["package-2024-01"]
    )

    input_files: list[str] = Field(
        min_length=1,
        description=(
            "Swagger files listed under 'input-file', relative to the readme folder. "
            "Example: 'Microsoft.Network/stable/2024-01-01/network.json'."
        )
    )

    set_latest: bool = Field(
        False,
        description="Also point 'Basic Information' at the new tag."
    )

    @field_validator('tag')
    @classmethod
    def validate_tag(cls, v: str) -> str:
        return validate_tag_name(v)

    @field_validator('input_files')
    @classmethod
    def validate_input_files(cls, v: list[str]) -> list[str]:
        """Validate every input file path and reject duplicates."""
        cleaned = [validate_relative_path(item, "Input file") for item in v]
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("Input files must not contain duplicates.")
        return cleaned

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "readme": "specification/network/resource-manager",
                    "tag": "package-2024-01",
                    "input_files": ["Microsoft.Network/stable/2024-01-01/network.json"],
                    "set_latest": True,
                    "repository": None
                }
            ]
        }
