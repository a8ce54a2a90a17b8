"""Checks that must pass before anything is written."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import TemplateNotFoundError, UnsafeDestinationError

__all__ = [
    "VCS_METADATA",
    "check_destination",
    "check_template_source",
    "destination_is_safe",
    "template_source_exists",
]


VCS_METADATA = ".git"


def _entries(directory: Path) -> list[str]:
    return sorted(entry.name for entry in directory.iterdir())


def destination_is_safe(directory: str | Path) -> bool:
    """Return ``True`` if ``directory`` is empty or only holds ``.git``."""

    entries = _entries(Path(directory))
    return not entries or entries == [VCS_METADATA]


def template_source_exists(path: str | Path) -> bool:
    """Return ``True`` if the template directory is present and readable."""

    path = Path(path)
    return path.is_dir() and os.access(path, os.R_OK | os.X_OK)


def check_destination(directory: str | Path) -> None:
    """Raise :class:`UnsafeDestinationError` unless ``directory`` is safe to populate."""

    directory = Path(directory)
    if not destination_is_safe(directory):
        entries = [name for name in _entries(directory) if name != VCS_METADATA]
        raise UnsafeDestinationError(directory, entries)


def check_template_source(path: str | Path) -> None:
    """Raise :class:`TemplateNotFoundError` if the template directory is unusable."""

    if not template_source_exists(path):
        raise TemplateNotFoundError(Path(path))
