from pathlib import Path

import pytest

from jitt import cli


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.parametrize("flag", ["help", "--help", "-h"])
def test_help_exits_zero(flag, capsys):
    assert cli.main([flag]) == 0
    out = capsys.readouterr().out
    assert "jitt - Jira + Git + Tiny Tooling" in out


def test_help_lists_commands(capsys):
    assert cli.main(["help"]) == 0
    out = capsys.readouterr().out
    assert "init [project]" in out
    assert "Initialize .jitt.yaml configuration file" in out
    assert "config [key] [value]  Get or set configuration values" in out
    assert "jitt config       # Show all configuration" in out
    assert "jitt config project       # Show current project" in out
    assert "jitt config project XYZ   # Set project to XYZ" in out
    assert "doctor            Check project setup and configuration" in out
    assert "jitt doctor       # Check if setup is correct" in out


def test_print_usage(capsys):
    cli.print_usage()
    out = capsys.readouterr().out
    assert out.startswith("jitt - Jira + Git + Tiny Tooling\n")
    assert "Usage: jitt <command> [arguments]" in out


def test_no_arguments_shows_usage_and_fails(capsys):
    assert cli.main([]) == 1
    out = capsys.readouterr().out
    assert "jitt - Jira + Git + Tiny Tooling" in out
    assert "Usage: jitt <command>" in out


def test_unknown_command(capsys):
    assert cli.main(["unknown-command"]) == 1
    captured = capsys.readouterr()
    assert 'jitt: unknown command "unknown-command"' in captured.err
    assert "Usage: jitt <command>" in captured.out


def test_dispatches_init(workdir, capsys):
    (workdir / ".git").mkdir()
    assert cli.main(["init", "TESTPROJ"]) == 0
    assert ".jitt.yaml created" in capsys.readouterr().out
    assert "project: TESTPROJ" in Path(".jitt.yaml").read_text(encoding="utf-8")


def test_dispatches_init_outside_repo(workdir, capsys):
    assert cli.main(["init"]) == 1
    assert "Not inside a Git repo" in capsys.readouterr().err
    assert not Path(".jitt.yaml").exists()


def test_dispatches_config(workdir, capsys):
    (workdir / ".git").mkdir()
    Path(".jitt.yaml").write_text("jira:\n  project: TESTPROJ", encoding="utf-8")
    assert cli.main(["config", "project"]) == 0
    assert "jira.project = TESTPROJ" in capsys.readouterr().out


def test_dispatches_doctor(workdir, capsys):
    assert cli.main(["doctor"]) == 1
    assert "❌ Not inside a Git repository" in capsys.readouterr().out