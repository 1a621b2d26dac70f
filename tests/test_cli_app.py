"""Tests for CLI routing and configuration error handling."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

import pytest

from goat.cli import app as cli_app
from goat.cli.commands.sleep import cmd_sleep
from goat.keymapping import Binding


class _Recorder:
    def __init__(self, result: int = 0) -> None:
        self.result = result
        self.calls: list[tuple[argparse.Namespace, Sequence[Binding]]] = []

    def __call__(self, args: argparse.Namespace, bindings: Sequence[Binding]) -> int:
        self.calls.append((args, bindings))
        return self.result


def _fail_if_called(*args: Any, **kwargs: Any) -> int:
    raise AssertionError("no UI should be started")


def test_invalid_exit_code_exits_1_before_ui(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(cli_app, "cmd_tui", _fail_if_called)
    monkeypatch.setattr(cli_app, "cmd_sleep", _fail_if_called)
    logging_calls: list[bool] = []

    code = cli_app.run(
        ["-t", "5", "-m", "200:x:bad"],
        configure_logging=lambda: logging_calls.append(True),
    )

    assert code == 1
    assert "Invalid mapping '200:x:bad'" in capsys.readouterr().err
    assert logging_calls == []


def test_malformed_mapping_exits_1_before_ui(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(cli_app, "cmd_tui", _fail_if_called)
    monkeypatch.setattr(cli_app, "cmd_sleep", _fail_if_called)

    code = cli_app.run(["-t", "5", "-m", "70:x"])

    assert code == 1
    assert "format should be <retcode>:<key>:<label>" in capsys.readouterr().err


def test_argument_error_exits_1_before_ui(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_app, "cmd_tui", _fail_if_called)

    with pytest.raises(SystemExit) as exc_info:
        cli_app.run(["--title", "no time"])

    assert exc_info.value.code == 1


def test_run_routes_to_tui_when_interactive(monkeypatch: pytest.MonkeyPatch) -> None:
    tui = _Recorder(result=70)
    monkeypatch.setattr(cli_app, "cmd_tui", tui)
    monkeypatch.setattr(cli_app, "cmd_sleep", _fail_if_called)
    monkeypatch.setattr(cli_app, "is_interactive", lambda: True)

    code = cli_app.run(["-t", "30", "--title", "Deploy", "-m", "70:r:retry"])

    assert code == 70
    args, bindings = tui.calls[0]
    assert args.time == 30
    assert args.title == "Deploy"
    assert bindings == (Binding(exit_code=70, key="r", label="retry"),)


def test_run_routes_to_headless_without_terminal(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    sleep = _Recorder(result=0)
    monkeypatch.setattr(cli_app, "cmd_tui", _fail_if_called)
    monkeypatch.setattr(cli_app, "cmd_sleep", sleep)
    monkeypatch.setattr(cli_app, "is_interactive", lambda: False)

    assert cli_app.run(["-t", "3"]) == 0
    assert len(sleep.calls) == 1


def test_is_interactive_requires_both_streams() -> None:
    class _Stream:
        def __init__(self, tty: bool) -> None:
            self.tty = tty

        def isatty(self) -> bool:
            return self.tty

    assert cli_app.is_interactive(_Stream(True), _Stream(True)) is True  # type: ignore[arg-type]
    assert cli_app.is_interactive(_Stream(True), _Stream(False)) is False  # type: ignore[arg-type]
    assert cli_app.is_interactive(_Stream(False), _Stream(True)) is False  # type: ignore[arg-type]


def test_cmd_sleep_prints_banner_and_expires(
    capsys: pytest.CaptureFixture[str],
) -> None:
    now = [0.0]
    sleeps: list[float] = []

    def fake_sleep(seconds: float) -> None:
        sleeps.append(seconds)
        now[0] += seconds

    args = argparse.Namespace(time=2, title=None)

    code = cmd_sleep(args, (), clock=lambda: now[0], sleep=fake_sleep)

    assert code == 0
    assert sleeps == [1.0, 1.0]
    assert capsys.readouterr().out == "goat - sleeping for 2 seconds: 'goat'\n"
