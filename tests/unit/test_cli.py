from pathlib import Path

import pytest

from commentscan.cli import build_parser, main
from commentscan.constants import LANGUAGE_ENV_VAR
from commentscan.language_detection import available_languages


@pytest.fixture
def c_tree(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    root.mkdir()
    (root / "b.c").write_text("/* a\nb */\n", encoding="utf-8")
    (root / "a.c").write_text("int x; // note\n", encoding="utf-8")
    (root / "script.sh").write_text("# shell\necho hi\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LANGUAGE_ENV_VAR, raising=False)


def test_parser_defaults():
    args = build_parser().parse_args(["src"])
    assert args.directory == "src"
    assert args.language is None
    assert args.jobs == 1
    assert args.exclude == []
    assert not args.summary


def test_report_in_path_order(c_tree: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(c_tree)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].split() == [str(c_tree / "a.c"), "total:", "1", "inline:", "1", "block:", "0"]
    assert lines[1].split() == [str(c_tree / "b.c"), "total:", "2", "inline:", "0", "block:", "2"]


def test_summary_row(c_tree: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(c_tree), "--summary"]) == 0
    last = capsys.readouterr().out.splitlines()[-1]
    assert last.split() == ["TOTAL", "total:", "3", "inline:", "1", "block:", "2"]


def test_language_option(c_tree: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(c_tree), "--language", "shell"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].split()[0] == str(c_tree / "script.sh")


def test_language_from_environment(
    c_tree: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setenv(LANGUAGE_ENV_VAR, "shell")
    assert main([str(c_tree)]) == 0
    out = capsys.readouterr().out
    assert "script.sh" in out
    assert "a.c" not in out


def test_unknown_language_is_fatal(
    c_tree: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setenv(LANGUAGE_ENV_VAR, "cobol")
    assert main([str(c_tree)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unknown language 'cobol'" in captured.err


def test_missing_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    missing = tmp_path / "missing"
    assert main([str(missing)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"error: directory does not exist: {missing}" in captured.err


def test_no_source_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "notes.txt").write_text("hello\n", encoding="utf-8")
    assert main([str(tmp_path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "no c source files found" in captured.err


def test_directory_required(capsys: pytest.CaptureFixture[str]):
    assert main([]) == 2
    assert "usage:" in capsys.readouterr().err


def test_invalid_jobs(c_tree: Path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(c_tree), "--jobs", "0"])
    assert excinfo.value.code == 2


def test_list_languages(capsys: pytest.CaptureFixture[str]):
    assert main(["--list-languages"]) == 0
    assert capsys.readouterr().out.splitlines() == available_languages()
