"""Names that are never copied out of the template."""

from __future__ import annotations

__all__ = ["EXCLUDED_NAMES", "is_excluded"]


EXCLUDED_NAMES: frozenset[str] = frozenset(
    {
        # dependency cache and build output
        "node_modules",
        "build",
        # lock files, the new project resolves its own
        "package-lock.json",
        "npm-debug.log",
        "yarn.lock",
        "pnpm-lock.yaml",
        "bun.lock",
        "bun.lockb",
        # version control and editor metadata
        ".git",
        ".cursor",
        # packaging only
        "bin",
        "LICENSE",
    }
)


def is_excluded(name: str) -> bool:
    """Return ``True`` when an entry called ``name`` must not be copied.

    Matching is exact and case sensitive and does not depend on where in the
    tree the entry lives.
    """

    return name in EXCLUDED_NAMES
