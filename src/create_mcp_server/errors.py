"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a scaffold run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UnsafeDestinationError(ScaffoldError):
    """Raised when the destination already holds files that could be overwritten."""

    def __init__(self, directory: Path, entries: list[str]) -> None:
        self.directory = directory
        self.entries = entries
        super().__init__(f"{directory} is not empty")


class TemplateNotFoundError(ScaffoldError):
    """Raised when the bundled template directory is missing."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"template source not found at {path}")


class ReplicationError(ScaffoldError):
    """Raised when the filesystem refuses a read or write while populating the project."""


class BuildError(ScaffoldError):
    """Raised when installing dependencies or building the generated project fails."""

    def __init__(self, message: str, *, command: list[str] | None = None) -> None:
        self.command = command
        super().__init__(message)


__all__ = [
    "BuildError",
    "ReplicationError",
    "ScaffoldError",
    "TemplateNotFoundError",
    "UnsafeDestinationError",
]
