from __future__ import annotations

from pathlib import Path

import pytest

from create_mcp_server import cli
from create_mcp_server.cli import build_parser, main, run
from create_mcp_server.config import ScaffoldConfig
from tests.fixtures.console_fake import FakeRunner, RecordingReporter, ScriptedPrompt
from tests.fixtures.tree import list_files


def _config(template_root: Path, target_dir: Path) -> ScaffoldConfig:
    return ScaffoldConfig(template_root=template_root, target_dir=target_dir, install=False)


def test_run_success_prints_usage(template_root, target_dir, prompt, reporter):
    prompt.answer = "demo"
    exit_code = run(_config(template_root, target_dir), prompt, reporter)

    assert exit_code == 0
    assert "claude mcp add demo -- npx" in reporter.text("line")
    assert "MCP server project created successfully" in reporter.text("success")


def test_run_degraded_build_still_exits_zero(template_root, target_dir, prompt, reporter):
    runner = FakeRunner(fail_on="install", error=FileNotFoundError("npm"))
    config = ScaffoldConfig(template_root=template_root, target_dir=target_dir)

    exit_code = run(config, prompt, reporter, runner=runner, which=lambda name: None)

    assert exit_code == 0
    assert "Couldn't automatically install" in reporter.text("warning")


def test_run_unsafe_destination_exits_one(template_root, target_dir, prompt, reporter):
    (target_dir / "notes.txt").write_text("x", encoding="utf-8")

    exit_code = run(_config(template_root, target_dir), prompt, reporter)

    assert exit_code == 1
    assert "not empty" in reporter.text("warning")
    assert "notes.txt" in reporter.text("line")
    assert prompt.questions == []
    assert list_files(target_dir) == {"notes.txt"}


def test_run_missing_template_exits_one(tmp_path: Path, target_dir, prompt, reporter):
    exit_code = run(_config(tmp_path / "missing", target_dir), prompt, reporter)

    assert exit_code == 1
    assert "Source directory not found" in reporter.text("error")
    assert "issues" in reporter.text("line")


def test_run_unexpected_error_exits_one(template_root, target_dir, reporter):
    class BrokenPrompt(ScriptedPrompt):
        def ask(self, question: str) -> str:
            raise EOFError("stdin closed")

    exit_code = run(_config(template_root, target_dir), BrokenPrompt(), reporter)

    assert exit_code == 1
    assert "Unexpected error: stdin closed" in reporter.text("error")


def test_parser_has_no_required_arguments():
    args = build_parser().parse_args([])
    assert vars(args) == {}


def test_version_flag(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert "create-mcp-server" in capsys.readouterr().out


def test_main_uses_working_directory(
    template_root: Path,
    target_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
):
    reporter = RecordingReporter()
    monkeypatch.chdir(target_dir)
    monkeypatch.setenv("CREATE_MCP_SERVER_TEMPLATE_DIR", str(template_root))
    monkeypatch.setenv("CREATE_MCP_SERVER_SKIP_INSTALL", "1")
    monkeypatch.setattr(cli, "ConsolePrompt", lambda: ScriptedPrompt("from-main"))
    monkeypatch.setattr(cli, "ConsoleReporter", lambda: reporter)

    assert main([]) == 0
    assert (target_dir / "package.json").exists()
    assert '"name": "from-main"' in (target_dir / "package.json").read_text(encoding="utf-8")
