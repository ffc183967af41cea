from __future__ import annotations

from pathlib import Path

import pytest
import typer

from rollout.cli.commands import previous_tag as cmd_mod
from rollout.cli.context import CLIContext
from rollout.core.errors import ErrorCode
from rollout.core.result import Err, Ok
from rollout.git.repository import GitError
from rollout.output.console import MockConsole


def _patch_tags(monkeypatch: pytest.MonkeyPatch, result: object) -> None:
    class FakeRepository:
        def __init__(self, path: Path) -> None:
            self.path = path

        def tags(self):
            return result

    monkeypatch.setattr(cmd_mod, "Repository", FakeRepository)


def _ctx(tmp_path: Path) -> CLIContext:
    return CLIContext(workdir=tmp_path, console=MockConsole(), environ={})


def test_prints_previous(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _patch_tags(monkeypatch, Ok(["v3", "v2", "v1"]))

    cmd_mod.show_previous_tag(_ctx(tmp_path), current="v3")

    assert capsys.readouterr().out.strip() == "v2"


def test_no_previous_warns(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_tags(monkeypatch, Ok(["v1"]))
    ctx = _ctx(tmp_path)

    cmd_mod.show_previous_tag(ctx)

    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.has_warning()


def test_git_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_tags(monkeypatch, Err(GitError(command="tag -l", message="not a git repository")))

    with pytest.raises(typer.Exit) as exc:
        cmd_mod.show_previous_tag(_ctx(tmp_path))

    assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)
