"""Tests for cli/__init__.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from . import CLI, main

MAKEFILE = """\
# demo
all: lib
\techo building all
lib:
\techo building lib
broken:
\techo bad >&2
\techo unreachable
"""


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "Makefile").write_text(MAKEFILE)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_is_target_mode() -> None:
    assert CLI(["all"])._is_target_mode() is True
    assert CLI(["list"])._is_target_mode() is False
    assert CLI([])._is_target_mode() is False


def test_is_target_mode_skips_option_values() -> None:
    assert CLI(["-f", "list", "build"])._is_target_mode() is True
    assert CLI(["--failure-policy", "both", "doctor"])._is_target_mode() is False


def test_default_target(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run([]) == 0
    out = capsys.readouterr().out
    assert out == "echo building lib\nbuilding lib\necho building all\nbuilding all\n"


def test_target_mode(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["lib", "lib"]) == 0
    out = capsys.readouterr().out
    assert out.count("building lib\n") == 4


def test_run_subcommand_quiet(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["-q", "run", "lib"]) == 0
    assert capsys.readouterr().out == "building lib\n"


def test_dry_run(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["-n", "all"]) == 0
    assert capsys.readouterr().out == "echo building lib\necho building all\n"


def test_build_error(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["broken"]) == 1
    captured = capsys.readouterr()
    assert "unreachable" not in captured.out
    assert captured.err.startswith("bad\n")
    assert "Error: Target 'broken' failed" in captured.err


def test_failure_policy_flag(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["--failure-policy", "exit-status", "broken"]) == 0
    assert "unreachable" in capsys.readouterr().out


def test_unknown_target(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["nope"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No such target: 'nope'" in captured.err


def test_missing_makefile(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert _run(["all"]) == 1


def test_parse_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.mk"
    path.write_text("all:\nnot a target\n")
    assert _run(["-f", str(path), "all"]) == 1
    assert "Line 2 is not a target" in capsys.readouterr().err


def test_empty_makefile(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "empty.mk"
    path.write_text("# nothing here\n")
    assert _run(["-f", str(path)]) == 1
    assert "No targets defined" in capsys.readouterr().err


def test_directory_and_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    project_dir = tmp_path / "proj"
    project_dir.mkdir()
    (project_dir / "build.mk").write_text("hello:\n\techo hi\n")
    (project_dir / "minimake.toml").write_text('makefile = "build.mk"\necho = false\n')
    monkeypatch.chdir(tmp_path)
    assert _run(["-C", "proj"]) == 0
    assert capsys.readouterr().out == "hi\n"


def test_list(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["list"]) == 0
    out = capsys.readouterr().out
    assert "  all (default) <- lib" in out
    assert "  broken\n" in out


def test_graph(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["graph", "all"]) == 0
    assert '"all" -> "lib";' in capsys.readouterr().out


def test_help(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["help"]) == 0
    assert "usage: minimake" in capsys.readouterr().out


def test_doctor_clean(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["doctor"]) == 0
    assert "No issues found." in capsys.readouterr().out


def test_doctor_reports_cycle(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "cycle.mk"
    path.write_text("a: b\n\techo a\nb: a\n\techo b\nc: gone.txt\n\techo c\n")
    assert _run(["-f", str(path), "doctor"]) == 1
    out = capsys.readouterr().out
    assert "cyclic dependency" in out
    assert "gone.txt" in out
    assert "1 error(s)" in out


def test_doctor_single_target_warnings_only(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "warn.mk"
    path.write_text("a: b\n\techo a\nb: a\nc: gone.txt\n\techo c\n")
    assert _run(["-f", str(path), "doctor", "c"]) == 0
    out = capsys.readouterr().out
    assert "gone.txt" in out
    assert "1 warning(s)" in out
