"""Module-level constants for the readme editor MCP server."""

import os
from pathlib import Path

# Configuration
CONFIG_PATH = Path(
    os.environ.get("README_EDITOR_CONFIG", Path(__file__).parent.parent / "repositories.yaml")
)

# Readme conventions
README_FILENAME = "readme.md"
LATEST_HEADING = "Basic Information"
TAG_MARKER = "### Tag"
TAG_FIELD = "tag"
INPUT_FILE_FIELD = "input-file"

# Limits
MAX_README_BYTES = 1_048_576

# Logging
LOG_LEVEL = "INFO"
