"""Project name resolution."""

from __future__ import annotations

from pathlib import Path

__all__ = ["default_project_name", "resolve_project_name"]


FALLBACK_NAME = "mcp-server"


def default_project_name(directory: str | Path) -> str:
    """Return the base name of ``directory``, used when the user gives no name."""

    name = Path(directory).resolve().name.strip()
    return name or FALLBACK_NAME


def resolve_project_name(answer: str | None, directory: str | Path) -> str:
    """Return the trimmed ``answer`` or the default derived from ``directory``.

    ``None`` and whitespace-only answers select the default, so the result is
    never empty.
    """

    name = (answer or "").strip()
    if name:
        return name
    return default_project_name(directory)
