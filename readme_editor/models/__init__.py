"""Pydantic input models for MCP tool validation.

Each model represents the input schema for one tool, with field-level
validation and descriptive error messages.

Architecture:
- base: BaseReadmeInput and shared validators
- readme_models: Input models for readme metadata operations
- repository_models: Input models for repository management operations
"""

from .base import BaseReadmeInput
from .readme_models import (
    ReadCodeBlocksInput,
    ReadLatestTagInput,
    SetLatestTagInput,
    AddTagDefinitionInput,
)
from .repository_models import (
    ListRepositoriesInput,
    SetActiveRepositoryInput,
)

__all__ = [
    # Base models
    "BaseReadmeInput",
    # Readme models
    "ReadCodeBlocksInput",
    "ReadLatestTagInput",
    "SetLatestTagInput",
    "AddTagDefinitionInput",
    # Repository models
    "ListRepositoriesInput",
    "SetActiveRepositoryInput",
]
