"""Tests for doctor.py."""

from minimake import parse
from minimake.doctor import Doctor


def _doctor(text: str, files: set[str] | None = None) -> Doctor:
    existing = files or set()
    return Doctor(parse(text), exists=lambda p: p in existing)


def test_no_issues() -> None:
    doctor = _doctor("all: lib main.c\n\tcc\nlib:\n\ttouch lib\n", {"main.c"})
    assert doctor.check_all() == []


def test_missing_file() -> None:
    issues = _doctor("all: missing.txt\n\techo\n").check_all()
    assert len(issues) == 1
    assert issues[0].severity == "warning"
    assert issues[0].target == "all"
    assert "missing.txt" in issues[0].message


def test_file_made_by_earlier_dependency_is_not_an_error() -> None:
    text = "all: gen data.txt\n\tcat data.txt\ngen:\n\ttouch data.txt\n"
    issues = _doctor(text).check_all()
    assert [i.severity for i in issues] == ["warning"]


def test_cycle_reported_once() -> None:
    issues = _doctor("a: b\n\techo\nb: a\n\techo\n").check_all()
    cycles = [i for i in issues if "cyclic" in i.message]
    assert len(cycles) == 1
    assert cycles[0].severity == "error"


def test_duplicates_and_empty_targets_warn() -> None:
    issues = _doctor("a:\n\techo 1\na:\n\techo 2\nphony:\n").check_all()
    assert {(i.severity, i.target) for i in issues} == {
        ("warning", "a"),
        ("warning", "phony"),
    }


def test_check_only_reachable_targets() -> None:
    doctor = _doctor("a: b\n\techo\nb:\n\techo\nc: missing\n\techo\n")
    makefile = doctor.makefile
    assert doctor.check_all(makefile.get_or_raise("a")) == []
    assert len(doctor.check_all(makefile.get_or_raise("c"))) == 1


def test_issue_str() -> None:
    issues = _doctor("all: gone\n\techo\n").check_all()
    assert str(issues[0]).startswith("[warning] all: ")
