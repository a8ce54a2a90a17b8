from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.fixtures.console_fake import FakeRunner, RecordingReporter, ScriptedPrompt  # noqa: E402
from tests.fixtures.tree import write_tree  # noqa: E402


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def prompt() -> ScriptedPrompt:
    return ScriptedPrompt()


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    """A small template resembling the bundled one."""

    root = tmp_path / "template"
    write_tree(
        root,
        {
            "src/index.ts": "console.log('hello');\n",
            "src/server/http-server.ts": "export {};\n",
            "src/node_modules/ignored.js": "ignored\n",
            "src/bun.lock": "lock\n",
            "node_modules/ignored.js": "ignored\n",
            ".git/HEAD": "ref: refs/heads/main\n",
            "README.md": "# template\n",
            "LICENSE": "MIT\n",
            ".gitignore": "node_modules/\n",
            "tsconfig.json": "{}\n",
        },
    )
    return root


@pytest.fixture()
def target_dir(tmp_path: Path) -> Path:
    target = tmp_path / "my-server"
    target.mkdir()
    return target
