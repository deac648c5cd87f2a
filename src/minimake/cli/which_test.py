"""Tests for which command."""

from __future__ import annotations

import argparse

import pytest

from ..parser import parse
from .context import CommandContext
from .which import WhichCommand

MAKEFILE = "all: lib app\n\tlink\nlib:\n\tcc lib.c\napp: lib main.c\n\tcc main.c\n"


def test_which_shows_dependencies(capsys: pytest.CaptureFixture[str]) -> None:
    args = argparse.Namespace(target="all", dependents=False)
    ctx = CommandContext(parse(MAKEFILE), args)
    WhichCommand(ctx).execute()

    out = capsys.readouterr().out
    assert "all" in out
    assert "app" in out
    assert "main.c" in out


def test_which_shows_dependents(capsys: pytest.CaptureFixture[str]) -> None:
    args = argparse.Namespace(target="lib", dependents=True)
    ctx = CommandContext(parse(MAKEFILE), args)
    WhichCommand(ctx).execute()

    out = capsys.readouterr().out
    assert "all" in out
    assert "app" in out


def test_which_survives_cycles(capsys: pytest.CaptureFixture[str]) -> None:
    args = argparse.Namespace(target="a", dependents=False)
    ctx = CommandContext(parse("a: b\nb: a\n"), args)
    WhichCommand(ctx).execute()

    assert "b" in capsys.readouterr().out
