"""The ``package.json`` written into a new project."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEPENDENCIES",
    "DEV_DEPENDENCIES",
    "PEER_DEPENDENCIES",
    "SCRIPTS",
    "ProjectDescriptor",
    "build_manifest",
    "render_manifest",
    "write_manifest",
]


ENTRY_MODULE = "src/index.ts"
BUILD_OUTPUT = "build/index.js"

SCRIPTS: dict[str, str] = {
    "start": "node --loader ts-node/esm src/index.ts",
    "start:bun": "bun run src/index.ts",
    "build": "npm run build:bun || npm run build:tsc",
    "build:bun": (
        "command -v bun >/dev/null && bun build src/index.ts --outdir build --target node"
        " || (echo 'Bun not found, using tsc' && npm run build:tsc)"
    ),
    "build:tsc": "tsc --project tsconfig.json && chmod +x build/index.js",
    "build:http": "npm run build:http:bun || npm run build:http:tsc",
    "build:http:bun": (
        "command -v bun >/dev/null && bun build src/server/http-server.ts --outdir build --target node"
        " || (echo 'Bun not found, using tsc' && npm run build:http:tsc)"
    ),
    "build:http:tsc": "tsc --project tsconfig.json",
    "dev": "nodemon --exec ts-node --esm src/index.ts",
    "dev:bun": "bun --watch src/index.ts",
    "start:http": "node --loader ts-node/esm src/server/http-server.ts",
    "start:http:bun": "bun run src/server/http-server.ts",
    "dev:http": "nodemon --exec ts-node --esm src/server/http-server.ts",
    "dev:http:bun": "bun --watch src/server/http-server.ts",
    "prepare": "npm run build",
}

DEPENDENCIES: dict[str, str] = {
    "fastmcp": "^1.21.0",
    "cors": "^2.8.5",
    "zod": "^3.24.2",
}

PEER_DEPENDENCIES: dict[str, str] = {
    "typescript": "^5.8.2",
    "@valibot/to-json-schema": "^1.0.0",
    "effect": "^3.14.4",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "@types/bun": "latest",
    "@types/cors": "^2.8.17",
    "@types/node": "^20.11.0",
}


class ProjectDescriptor(BaseModel):
    """Structured form of the generated ``package.json``."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Package name, also used as the executable name.")
    module: str = Field(ENTRY_MODULE, description="Module entry point of the server.")
    type: str = Field("module", description="Module system of the package.")
    version: str = Field("1.0.0", description="Initial package version.")
    description: str = Field(..., description="One line summary of the package.")
    private: bool = Field(True, description="Prevents accidental publication.")
    bin: Dict[str, str] = Field(default_factory=dict, description="Executables exposed by the package.")
    scripts: Dict[str, str] = Field(default_factory=dict, description="Package script command table.")
    dev_dependencies: Dict[str, str] = Field(
        default_factory=dict,
        alias="devDependencies",
        description="Development-only dependencies and their version ranges.",
    )
    peer_dependencies: Dict[str, str] = Field(
        default_factory=dict,
        alias="peerDependencies",
        description="Dependencies the host project is expected to provide.",
    )
    dependencies: Dict[str, str] = Field(default_factory=dict, description="Runtime dependencies and their version ranges.")


def build_manifest(project_name: str) -> ProjectDescriptor:
    """Return the descriptor of a new MCP server package called ``project_name``."""

    return ProjectDescriptor(
        name=project_name,
        description=f"Model Context Protocol (MCP) Server - {project_name}",
        bin={project_name: BUILD_OUTPUT},
        scripts=dict(SCRIPTS),
        dev_dependencies=dict(DEV_DEPENDENCIES),
        peer_dependencies=dict(PEER_DEPENDENCIES),
        dependencies=dict(DEPENDENCIES),
    )


def render_manifest(descriptor: ProjectDescriptor) -> str:
    """Serialize ``descriptor`` the way package managers format ``package.json``."""

    return descriptor.model_dump_json(by_alias=True, indent=2)


def write_manifest(descriptor: ProjectDescriptor, directory: str | Path, filename: str = "package.json") -> Path:
    """Write ``descriptor`` into ``directory`` and return the file path."""

    path = Path(directory) / filename
    path.write_text(render_manifest(descriptor), encoding="utf-8")
    return path
