"""Scaffold Model Context Protocol server projects.

The package copies a bundled FastMCP TypeScript template into an empty
directory, writes a ``package.json`` and ``README.md`` tailored to the chosen
project name, and then tries to install dependencies and build the result.
The pieces are usable on their own: :func:`replicate` mirrors a directory
while skipping :data:`EXCLUDED_NAMES`, :func:`build_manifest` and
:func:`build_readme` produce the generated files, and
:class:`ProjectScaffolder` runs the whole sequence.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ScaffoldConfig
from .errors import (
    BuildError,
    ReplicationError,
    ScaffoldError,
    TemplateNotFoundError,
    UnsafeDestinationError,
)
from .exclusions import EXCLUDED_NAMES, is_excluded
from .manifest import ProjectDescriptor, build_manifest, render_manifest, write_manifest
from .naming import resolve_project_name
from .preflight import destination_is_safe, template_source_exists
from .readme import build_readme, build_usage
from .replicate import replicate
from .scaffold import ProjectScaffolder, ScaffoldResult, ScaffoldStage
from .template import TemplateRenderer, TemplateRenderingError
from .tooling import BuildOutcome, detect_package_manager

__all__ = [
    "BuildError",
    "BuildOutcome",
    "EXCLUDED_NAMES",
    "ProjectDescriptor",
    "ProjectScaffolder",
    "ReplicationError",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldStage",
    "TemplateNotFoundError",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UnsafeDestinationError",
    "build_manifest",
    "build_readme",
    "build_usage",
    "destination_is_safe",
    "detect_package_manager",
    "is_excluded",
    "render_manifest",
    "replicate",
    "resolve_project_name",
    "template_source_exists",
    "write_manifest",
]
