from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from ts_scaffold import __version__
from ts_scaffold.cli import build_parser, main
from ts_scaffold.errors import ExternalToolError
from ts_scaffold.prompts import (
    GIT_PROMPT,
    STRICT_PROMPT,
    ConsoleOptionResolver,
    ScriptedOptionResolver,
)
from ts_scaffold.template import TemplateStore


@pytest.fixture(autouse=True)
def in_tmp_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_cli_creates_project_in_current_directory(tmp_path: Path, fake_git, capsys):
    resolver = ScriptedOptionResolver({GIT_PROMPT: True, STRICT_PROMPT: True})
    exit_code = main(["demo"], resolver=resolver, vcs=fake_git)

    assert exit_code == 0
    root = tmp_path / "demo"
    assert (root / ".git").is_dir()
    assert (root / ".gitignore").exists()
    assert json.loads((root / "package.json").read_text(encoding="utf-8"))["name"] == "demo"
    assert json.loads((root / "tsconfig.json").read_text(encoding="utf-8"))["compilerOptions"][
        "strict"
    ] is True
    assert (root / "src" / "main.ts").exists()
    assert f"Project created at {root}" in capsys.readouterr().out


def test_cli_reads_answers_from_console(tmp_path: Path, fake_git):
    resolver = ConsoleOptionResolver(stdin=io.StringIO("n\n\n"), stdout=io.StringIO())
    exit_code = main(["demo"], resolver=resolver, vcs=fake_git)

    assert exit_code == 0
    assert fake_git.calls == []
    options = json.loads((tmp_path / "demo" / "tsconfig.json").read_text(encoding="utf-8"))[
        "compilerOptions"
    ]
    assert "strict" not in options


def test_cli_closed_input_exits_non_zero(tmp_path: Path, fake_git, capsys):
    resolver = ConsoleOptionResolver(stdin=io.StringIO(""), stdout=io.StringIO())
    exit_code = main(["demo"], resolver=resolver, vcs=fake_git)

    assert exit_code == 1
    assert "error:" in capsys.readouterr().err
    # The project directory is not rolled back.
    assert (tmp_path / "demo").is_dir()


def test_cli_reports_external_tool_failure(capsys):
    class FailingGit:
        def init(self, directory: Path) -> None:
            raise ExternalToolError("could not find 'git'", ["git", "init"])

    resolver = ScriptedOptionResolver({GIT_PROMPT: True})
    exit_code = main(["demo"], resolver=resolver, vcs=FailingGit())

    assert exit_code == 1
    assert "could not find 'git'" in capsys.readouterr().err


def test_cli_reports_broken_templates_before_touching_disk(tmp_path: Path, fake_git):
    resolver = ScriptedOptionResolver([])
    exit_code = main(
        ["demo"],
        resolver=resolver,
        vcs=fake_git,
        store=TemplateStore(directory="does-not-exist"),
    )

    assert exit_code == 1
    assert not (tmp_path / "demo").exists()


def test_cli_requires_project_name(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("name", ["", "a/b", ".."])
def test_cli_rejects_invalid_project_name(name: str, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([name])
    assert excinfo.value.code == 2
    assert "project_name" in capsys.readouterr().err


def test_parser_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"ts-scaffold {__version__}"
