"""Tests for the greek-betacode command-line front end."""

import io

import pytest

from greek_betacode.cli import build_parser, main


@pytest.fixture
def stdin(monkeypatch):
    """Replace stdin with the given text."""

    def _set(text: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _set


# =============================================================================
# Standard Input
# =============================================================================


class TestStdin:
    def test_converts_lines(self, stdin, capsys):
        stdin("mh=nin a)ei/de\nqea/\n")
        assert main([]) == 0
        assert capsys.readouterr().out == "μῆνιν ἀείδε\nθεά\n"

    def test_final_sigma_at_end_of_input(self, stdin, capsys):
        stdin("qeos")
        assert main([]) == 0
        assert capsys.readouterr().out == "θεος"

    def test_keep_final_sigma(self, stdin, capsys):
        stdin("qeos")
        assert main(["--keep-final-sigma"]) == 0
        assert capsys.readouterr().out == "θεοσ"

    def test_combining(self, stdin, capsys):
        stdin("a)/\n")
        assert main(["--combining"]) == 0
        assert capsys.readouterr().out == "α\u0313\u0301\n"

    def test_dash_reads_stdin(self, stdin, capsys):
        stdin("lo/gos\n")
        assert main(["-"]) == 0
        assert capsys.readouterr().out == "λόγος\n"

    def test_custom_terminators(self, stdin, capsys):
        stdin("qeos#")
        assert main(["--terminators", "#"]) == 0
        assert capsys.readouterr().out == "θεος#"

    def test_relaxed_rejects_asterisk(self, stdin, capsys):
        stdin("*a\n")
        assert main(["--relaxed"]) == 1
        assert "<stdin>:1:1:" in capsys.readouterr().err

    def test_dangling_asterisk_at_end(self, stdin, capsys):
        stdin("a *")
        assert main([]) == 1
        err = capsys.readouterr().err
        assert "<stdin>:1:" in err
        assert "asterisk" in err


# =============================================================================
# Files
# =============================================================================


class TestFiles:
    def test_file_input(self, tmp_path, capsys):
        path = tmp_path / "in.txt"
        path.write_text("*)axilleu/s\n", encoding="utf-8")
        assert main([str(path)]) == 0
        assert capsys.readouterr().out == "Ἀχιλλεύς\n"

    def test_multiple_files(self, tmp_path, capsys):
        first = tmp_path / "a.txt"
        second = tmp_path / "b.txt"
        first.write_text("qea/\n", encoding="utf-8")
        second.write_text("qeo/s\n", encoding="utf-8")
        assert main([str(first), str(second)]) == 0
        assert capsys.readouterr().out == "θεά\nθεός\n"

    def test_error_location(self, tmp_path, capsys):
        path = tmp_path / "in.txt"
        path.write_text("mh=nin\nt(\n", encoding="utf-8")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == "μῆνιν\n"
        assert "in.txt:2:2:" in captured.err
        assert "breathing" in captured.err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "Error:" in capsys.readouterr().err


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.files == []
        assert not args.combining
        assert not args.relaxed
        assert args.terminators is None
