from __future__ import annotations

import pytest

from goat.cli.parser import parse_args


def test_parse_args_time_and_defaults() -> None:
    args = parse_args(["--time", "30"])
    assert args.time == 30
    assert args.title is None
    assert args.mappings == []


def test_parse_args_short_flags_and_repeated_mappings() -> None:
    args = parse_args(
        ["-t", "5", "--title", "Deploy", "-m", "70:r:retry", "--mapping", "71:s:skip"]
    )
    assert args.time == 5
    assert args.title == "Deploy"
    assert args.mappings == ["70:r:retry", "71:s:skip"]


def test_parse_args_mappings_are_not_validated_by_parser() -> None:
    args = parse_args(["-t", "5", "-m", "200:x:bad"])
    assert args.mappings == ["200:x:bad"]


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--time"],
        ["--time", "abc"],
        ["--time", "0"],
        ["--time", "-3"],
        ["--time", "5", "--unknown"],
    ],
)
def test_parse_args_errors_exit_with_code_1(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = parse_args(argv)

    assert exc_info.value.code == 1
    assert "error:" in capsys.readouterr().err


def test_parse_args_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = parse_args(["--version"])

    assert exc_info.value.code == 0
    assert "goat" in capsys.readouterr().out
