"""Tests for the command line."""

import io
from pathlib import Path

import pytest

from sql_align.cli import main
from sql_align.logtools import configure_logging

UNALIGNED = "INSERT INTO t (a) VALUES (1), (10);\n"
ALIGNED = "INSERT INTO t (a)\nVALUES\n    ( 1),\n    (10);\n"


@pytest.fixture(autouse=True)
def quiet_logging():
    yield
    configure_logging(verbose=False)


class TestMain:
    """Tests for main()."""

    def test_format_file(self, tmp_path: Path, capsys):
        """Test formatting a named file."""
        path = tmp_path / "seed.sql"
        path.write_text(UNALIGNED)

        result = main([str(path)])

        assert result == 0
        assert path.read_text() == ALIGNED
        assert f"Formatted: {path}" in capsys.readouterr().out

    def test_unchanged_file_silent(self, tmp_path: Path, capsys):
        """Test that an aligned file produces no output."""
        path = tmp_path / "seed.sql"
        path.write_text(ALIGNED)

        result = main([str(path)])

        assert result == 0
        assert capsys.readouterr().out == ""

    def test_dry_run(self, tmp_path: Path, capsys):
        """Test that dry run leaves the file alone."""
        path = tmp_path / "seed.sql"
        path.write_text(UNALIGNED)

        result = main(["--dry-run", str(path)])

        assert result == 0
        assert path.read_text() == UNALIGNED
        assert f"Would format: {path}" in capsys.readouterr().out

    def test_backup_flag(self, tmp_path: Path):
        """Test the backup flag."""
        path = tmp_path / "seed.sql"
        path.write_text(UNALIGNED)

        assert main(["-b", str(path)]) == 0
        assert (tmp_path / "seed.sql.bak").read_text() == UNALIGNED

    def test_format_error_reported(self, tmp_path: Path, capsys):
        """Test that a malformed statement sets the exit status."""
        path = tmp_path / "seed.sql"
        path.write_text("SELECT 1;\nINSERT INTO t VALUES (1, 2), (3);\n")

        result = main([str(path)])

        assert result == 1
        err = capsys.readouterr().err
        assert f"{path}:2: structure error:" in err

    def test_file_not_found(self, tmp_path: Path, capsys):
        """Test a missing path."""
        result = main([str(tmp_path / "nonexistent.sql")])

        assert result == 1
        assert "File not found" in capsys.readouterr().err

    def test_missing_path_does_not_stop_others(self, tmp_path: Path, capsys):
        """Test that existing files are formatted even when another path is missing."""
        path = tmp_path / "seed.sql"
        path.write_text(UNALIGNED)
        missing = tmp_path / "missing.sql"

        result = main([str(missing), str(path)])

        assert result == 1
        assert path.read_text() == ALIGNED
        captured = capsys.readouterr()
        assert f"File not found: {missing}" in captured.err
        assert f"Formatted: {path}" in captured.out

    def test_all_flag(self, tmp_path: Path, monkeypatch):
        """Test formatting every SQL file under the current directory."""
        (tmp_path / "db").mkdir()
        path = tmp_path / "db" / "seed.sql"
        path.write_text(UNALIGNED)
        monkeypatch.chdir(tmp_path)

        result = main(["--all", "-j", "2"])

        assert result == 0
        assert path.read_text() == ALIGNED

    def test_stdin(self, monkeypatch, capsys):
        """Test reading stdin and writing stdout."""
        monkeypatch.setattr("sys.stdin", io.StringIO(UNALIGNED))

        result = main([])

        assert result == 0
        assert capsys.readouterr().out == ALIGNED

    def test_stdin_error(self, monkeypatch, capsys):
        """Test that errors on stdin input are reported on stderr."""
        text = "INSERT INTO t VALUES (1), (2, 3);\n"
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

        result = main([])

        captured = capsys.readouterr()
        assert result == 1
        assert captured.out == text
        assert "<stdin>:1:" in captured.err

    def test_indent_option(self, monkeypatch, capsys):
        """Test the indent option."""
        monkeypatch.setattr("sys.stdin", io.StringIO("INSERT INTO t VALUES (1);"))

        assert main(["--indent", "0"]) == 0
        assert capsys.readouterr().out == "INSERT INTO t\nVALUES\n(1);"

    def test_negative_indent_rejected(self):
        """Test that a negative indent is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--indent", "-1"])

        assert exc_info.value.code == 2

    def test_verbose(self, tmp_path: Path, capsys):
        """Test that verbose mode logs progress on stderr."""
        path = tmp_path / "seed.sql"
        path.write_text(UNALIGNED)

        assert main(["-v", str(path)]) == 0
        assert "Reading file" in capsys.readouterr().err
