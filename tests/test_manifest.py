from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from create_mcp_server.manifest import (
    DEPENDENCIES,
    DEV_DEPENDENCIES,
    ProjectDescriptor,
    build_manifest,
    render_manifest,
    write_manifest,
)


def test_build_manifest_is_pure():
    first = build_manifest("weather-server")
    second = build_manifest("weather-server")
    assert first == second
    assert first.model_dump() == second.model_dump()
    assert build_manifest("other") != first


def test_build_manifest_uses_project_name():
    descriptor = build_manifest("weather-server")
    assert descriptor.name == "weather-server"
    assert descriptor.bin == {"weather-server": "build/index.js"}
    assert descriptor.description == "Model Context Protocol (MCP) Server - weather-server"
    assert descriptor.module == "src/index.ts"
    assert descriptor.private is True


def test_build_manifest_has_fixed_scripts_and_dependencies():
    descriptor = build_manifest("demo")
    scripts = descriptor.scripts
    for key in ("start", "start:bun", "build", "build:bun", "build:tsc", "build:http", "dev", "dev:bun"):
        assert key in scripts
    assert scripts["build"] == "npm run build:bun || npm run build:tsc"
    assert set(descriptor.dependencies) == {"fastmcp", "cors", "zod"}
    assert descriptor.dependencies == DEPENDENCIES
    assert descriptor.dev_dependencies == DEV_DEPENDENCIES
    assert "typescript" in descriptor.peer_dependencies


def test_build_manifest_does_not_share_module_tables():
    descriptor = build_manifest("demo")
    descriptor.scripts["start"] = "changed"
    assert build_manifest("demo").scripts["start"] != "changed"


def test_render_manifest_uses_package_json_keys():
    rendered = render_manifest(build_manifest("demo"))
    data = json.loads(rendered)
    assert list(data) == [
        "name",
        "module",
        "type",
        "version",
        "description",
        "private",
        "bin",
        "scripts",
        "devDependencies",
        "peerDependencies",
        "dependencies",
    ]
    assert rendered.startswith('{\n  "name": "demo"')


def test_write_manifest(tmp_path: Path):
    path = write_manifest(build_manifest("demo"), tmp_path)
    assert path == tmp_path / "package.json"
    assert json.loads(path.read_text(encoding="utf-8"))["name"] == "demo"


def test_descriptor_rejects_empty_name_and_unknown_fields():
    with pytest.raises(ValidationError):
        ProjectDescriptor(name="", description="x")
    with pytest.raises(ValidationError):
        ProjectDescriptor(name="demo", description="x", homepage="https://example.invalid")
