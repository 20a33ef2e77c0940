"""Tests for the misspell-backed checker."""

from __future__ import annotations

import subprocess

import pytest

from repolint.checkers import MisspellChecker, ToolError, ToolResult, run_tool
from tests._fixtures.repo_builder import FakeRunner, make_file


def test_misspell_accepts_documentation_files_with_local_copy() -> None:
    checker = MisspellChecker(runner=FakeRunner())
    readme = make_file("README.md")
    source = make_file("main.go")

    checker.push_file(readme)
    checker.push_file(source)

    assert checker.files == [readme]
    assert readme.require.local_copy is True
    assert readme.require.contents is False
    assert source.require.local_copy is False


def test_misspell_invokes_tool_with_temp_paths() -> None:
    runner = FakeRunner(returncode=0)
    checker = MisspellChecker("misspell", runner=runner)
    checker.push_file(make_file("README.md"))
    checker.push_file(make_file("docs/TODO.txt"))

    assert checker.check_files() == []
    assert runner.calls == [
        ["misspell", "-error", "true", "/tmp/rl-1234/README.md", "/tmp/rl-1234/docs/TODO.txt"]
    ]


def test_misspell_rewrites_temp_paths_in_findings() -> None:
    output = (
        '/tmp/rl-1234/README.md:4:10: "recieve" is a misspelling of "receive"\n'
        "\n"
        '/tmp/rl-1234/docs/TODO.txt:1:0: "teh" is a misspelling of "the"\n'
    )
    checker = MisspellChecker(runner=FakeRunner(output, returncode=2))
    checker.push_file(make_file("README.md"))
    checker.push_file(make_file("docs/TODO.txt"))

    assert checker.check_files() == [
        'README.md:4:10: "recieve" is a misspelling of "receive"',
        'docs/TODO.txt:1:0: "teh" is a misspelling of "the"',
    ]


def test_misspell_skips_tool_without_files() -> None:
    runner = FakeRunner("unexpected")
    checker = MisspellChecker(runner=runner)
    checker.push_file(make_file("main.go"))

    assert checker.check_files() == []
    assert runner.calls == []


def test_check_files_does_not_mutate_accepted_files() -> None:
    checker = MisspellChecker(runner=FakeRunner("/tmp/rl-1234/README.md:1:1: x\n"))
    checker.push_file(make_file("README.md"))

    checker.check_files()
    checker.check_files()

    assert [file.orig_path for file in checker.files] == ["README.md"]


def test_run_tool_reports_missing_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(*args, **kwargs):  # type: ignore[no-untyped-def]
        raise FileNotFoundError("misspell")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(ToolError, match="misspell"):
        run_tool(["misspell", "-error", "true"])


def test_run_tool_merges_output(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}

    def fake_run(args, **kwargs):  # type: ignore[no-untyped-def]
        captured["args"] = args
        captured["kwargs"] = kwargs
        return subprocess.CompletedProcess(args, 3, stdout="finding\n")

    monkeypatch.setattr(subprocess, "run", fake_run)

    result = run_tool(["liche", "README.md"])

    assert result == ToolResult(returncode=3, output="finding\n")
    assert captured["args"] == ["liche", "README.md"]
    assert captured["kwargs"]["stderr"] == subprocess.STDOUT
    assert captured["kwargs"]["check"] is False
