"""Core repository operations and readme path validation."""

from pathlib import Path

from readme_editor.constants import MAX_README_BYTES, README_FILENAME
from readme_editor.data_models import RepositoryMetadata


def ensure_repository_ready(repository: RepositoryMetadata) -> None:
    """Ensure the repository checkout is accessible before performing operations.

    Raises:
        FileNotFoundError: If the repository path does not exist or is not a directory.
    """
    if not repository.path.is_dir():
        raise FileNotFoundError(
            f"Repository '{repository.name}' is not accessible at {repository.path}"
        )


def construct_readme_path(identifier: str) -> Path:
    """Construct a relative Path from a pre-validated readme identifier.

    Identifiers naming a markdown file are used as-is; anything else is treated
    as a folder and resolves to the ``readme.md`` inside it.

    Examples:
        >>> construct_readme_path("specification/network/resource-manager")
        PosixPath('specification/network/resource-manager/readme.md')
        >>> construct_readme_path("specification/network/resource-manager/readme.go.md")
        PosixPath('specification/network/resource-manager/readme.go.md')
    """
    parts = [part for part in identifier.split("/") if part]
    if parts and parts[-1].lower().endswith(".md"):
        return Path(*parts)
    return Path(*parts, README_FILENAME)


def resolve_readme_path(repository: RepositoryMetadata, identifier: str) -> Path:
    """Resolve a pre-validated readme identifier to an absolute path in the repository.

    Input validation happens in the pydantic models; this only enforces that
    the resolved path stays inside the repository root.

    Raises:
        ValueError: If the resolved path escapes the repository root.
    """
    relative = construct_readme_path(identifier)
    candidate = (repository.path / relative).resolve(strict=False)
    repository_root = repository.path.resolve(strict=False)

    if not candidate.is_relative_to(repository_root):
        raise ValueError("Readme path escapes the configured repository.")

    return candidate


def readme_display_name(repository: RepositoryMetadata, path: Path) -> str:
    """Return the forward-slash path of a readme relative to its repository."""
    relative = path.relative_to(repository.path.resolve(strict=False))
    return relative.as_posix()


def load_readme(repository: RepositoryMetadata, identifier: str) -> tuple[Path, str]:
    """Read a readme from a repository.

    Returns:
        Tuple of (absolute path, text).

    Raises:
        FileNotFoundError: If the readme doesn't exist.
        ValueError: If the readme is too large or not UTF-8 encoded.
    """
    ensure_repository_ready(repository)
    target_path = resolve_readme_path(repository, identifier)
    if not target_path.is_file():
        raise FileNotFoundError(
            f"Readme '{readme_display_name(repository, target_path)}' not found in "
            f"repository '{repository.name}'."
        )

    if target_path.stat().st_size > MAX_README_BYTES:
        raise ValueError(
            f"Readme '{readme_display_name(repository, target_path)}' exceeds "
            f"{MAX_README_BYTES // 1024}KB and will not be edited."
        )

    try:
        # newline="" keeps \r\n endings so writes round-trip
        with target_path.open(encoding="utf-8", newline="") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise ValueError(
            f"Readme '{readme_display_name(repository, target_path)}' is not UTF-8 encoded "
            "and cannot be processed."
        ) from exc

    return target_path, text


def write_readme(path: Path, text: str) -> None:
    """Write readme text back without translating line endings."""
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)
