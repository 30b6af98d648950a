"""Regression tests for the optional Rich dependency.

Every command must still work, with plain stderr output, when Rich is
not importable.
"""

from __future__ import annotations

import logging
import sys

import pytest

from ops_dispatch.cli import exit_codes
from ops_dispatch.cli.app import main
from ops_dispatch.cli.console import configure_logging, console, get_rich_console, stdout
from ops_dispatch.exceptions import MissingDependencyError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_demo_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["demo"]) == exit_codes.SUCCESS
    assert "CONFLICT" in capsys.readouterr().err


def test_eval_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["eval", "G", "-", "H"]) == exit_codes.SUCCESS
    assert "Called <G> - <H>" in capsys.readouterr().out


def test_rich_console_raises_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(MissingDependencyError, match="rich is not installed"):
        get_rich_console()


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    configure_logging()
    handlers = logging.getLogger("ops_dispatch").handlers
    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler


def test_plain_channels_keep_their_streams(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    stdout.print("result", markup=False)
    console.print("diagnostic")
    captured = capsys.readouterr()
    assert captured.out == "result\n"
    assert captured.err == "diagnostic\n"
