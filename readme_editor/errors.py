"""Custom exceptions for readme editing.

All errors subclass ``ValueError`` so tool wrappers treat them as bad requests.
"""


class ReadmeEditorError(ValueError):
    """Base exception for readme editing operations."""


class HeadingNotIndexedError(ReadmeEditorError):
    """No code block could be associated with the requested heading."""

    def __init__(self, heading: str) -> None:
        super().__init__(f"No code block found under heading '{heading}'.")
        self.heading = heading


class YamlDecodeError(ReadmeEditorError):
    """A code block does not hold a YAML mapping."""


class MarkerNotFoundError(ReadmeEditorError):
    """The insertion marker is absent from the readme text."""

    def __init__(self, marker: str) -> None:
        super().__init__(f"Marker '{marker}' was not found in the readme.")
        self.marker = marker


class ReadmeDecodeError(ReadmeEditorError):
    """Transport-encoded readme content could not be decoded."""
