"""Runtime configuration for a scaffold run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

__all__ = [
    "DEFAULT_AUXILIARY_FILES",
    "DEFAULT_TEMPLATE_ROOT",
    "ISSUE_URL",
    "ScaffoldConfig",
]


DEFAULT_TEMPLATE_ROOT = Path(__file__).resolve().parent / "template"
DEFAULT_AUXILIARY_FILES = (".gitignore", "tsconfig.json")
ISSUE_URL = "https://github.com/mcpdotdirect/create-mcp-server/issues"

TEMPLATE_DIR_ENV = "CREATE_MCP_SERVER_TEMPLATE_DIR"
SKIP_INSTALL_ENV = "CREATE_MCP_SERVER_SKIP_INSTALL"
LOG_LEVEL_ENV = "CREATE_MCP_SERVER_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class ScaffoldConfig:
    """Locations and switches describing one scaffold run.

    Attributes
    ----------
    template_root:
        Directory holding the bundled template. Its :attr:`source_subdir`
        subtree is mirrored into the project and the :attr:`auxiliary_files`
        found at its top level are copied alongside.
    target_dir:
        Directory that receives the new project, normally the working
        directory of the invocation.
    install:
        When ``False`` the dependency installation and build step is skipped.
    issue_url:
        Where users are pointed when something unexpected goes wrong.
    """

    template_root: Path
    target_dir: Path
    source_subdir: str = "src"
    auxiliary_files: tuple[str, ...] = DEFAULT_AUXILIARY_FILES
    manifest_filename: str = "package.json"
    readme_filename: str = "README.md"
    install: bool = True
    issue_url: str = ISSUE_URL

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        cwd: str | Path | None = None,
    ) -> "ScaffoldConfig":
        """Build a config for ``cwd`` honouring ``CREATE_MCP_SERVER_*`` variables.

        Parameters
        ----------
        environ:
            Mapping to read variables from, :data:`os.environ` by default.
        cwd:
            Target directory, the process working directory by default.
        """

        environ = os.environ if environ is None else environ
        template_override = environ.get(TEMPLATE_DIR_ENV, "").strip()
        template_root = Path(template_override).expanduser() if template_override else DEFAULT_TEMPLATE_ROOT
        skip_install = environ.get(SKIP_INSTALL_ENV, "").strip().lower() in _TRUTHY

        return cls(
            template_root=template_root.resolve(),
            target_dir=Path(cwd if cwd is not None else Path.cwd()).resolve(),
            install=not skip_install,
        )

    @property
    def source_dir(self) -> Path:
        """Template subtree mirrored into the project."""

        return self.template_root / self.source_subdir

    @property
    def destination_source_dir(self) -> Path:
        return self.target_dir / self.source_subdir

