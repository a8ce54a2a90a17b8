from __future__ import annotations

from pathlib import Path

import pytest

from create_mcp_server.errors import TemplateNotFoundError, UnsafeDestinationError
from create_mcp_server.preflight import (
    check_destination,
    check_template_source,
    destination_is_safe,
    template_source_exists,
)


def test_empty_directory_is_safe(tmp_path: Path):
    assert destination_is_safe(tmp_path)


def test_directory_with_only_git_is_safe(tmp_path: Path):
    (tmp_path / ".git").mkdir()
    assert destination_is_safe(tmp_path)


@pytest.mark.parametrize(
    "entries",
    [
        ["notes.txt"],
        [".gitignore"],
        [".git", "README.md"],
        ["src/"],
    ],
)
def test_any_other_content_is_unsafe(tmp_path: Path, entries: list[str]):
    for entry in entries:
        path = tmp_path / entry.rstrip("/")
        if entry.endswith("/") or entry == ".git":
            path.mkdir()
        else:
            path.write_text("x", encoding="utf-8")

    assert not destination_is_safe(tmp_path)


def test_check_destination_reports_offending_entries(tmp_path: Path):
    (tmp_path / ".git").mkdir()
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")

    with pytest.raises(UnsafeDestinationError) as excinfo:
        check_destination(tmp_path)

    assert excinfo.value.entries == ["notes.txt"]
    assert excinfo.value.directory == tmp_path


def test_template_source_checks(tmp_path: Path):
    assert template_source_exists(tmp_path)
    assert not template_source_exists(tmp_path / "missing")

    a_file = tmp_path / "file.txt"
    a_file.write_text("x", encoding="utf-8")
    assert not template_source_exists(a_file)

    with pytest.raises(TemplateNotFoundError):
        check_template_source(tmp_path / "missing")
    check_template_source(tmp_path)


def test_checks_do_not_modify_directory(tmp_path: Path):
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    destination_is_safe(tmp_path)
    template_source_exists(tmp_path)
    assert [p.name for p in tmp_path.iterdir()] == ["notes.txt"]
