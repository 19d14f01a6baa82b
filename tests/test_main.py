"""
Tests for the command-line entry point.
"""

from pathlib import Path

import pytest

from nginx_blocks import __version__
from nginx_blocks.__main__ import main


def test_prints_tree(config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the default stage prints the normalized tree."""
    assert main([str(config_path), "--no-color"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("user www-data;\nhttp {\n\tserver {\n\t\tlisten 80;\n")


def test_prints_tokens(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test printing the token stage."""
    path = tmp_path / "a.conf"
    path.write_text("a { b; }")

    assert main([str(path), "--stage", "tokens"]) == 0
    assert capsys.readouterr().out == "'a' { 'b' ; }\n"


def test_prints_tokens_of_unbalanced_file(broken_config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the token stage works on files with broken braces."""
    assert main([str(broken_config_path), "--stage", "tokens"]) == 0
    assert capsys.readouterr().out == "'server' { 'listen' '80'\n"


def test_prints_groups(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test printing the grouped stage."""
    path = tmp_path / "a.conf"
    path.write_text("a { b; }")

    assert main([str(path), "--stage", "groups"]) == 0
    assert capsys.readouterr().out == "'a' ( 'b' ; )\n"


def test_groups_of_unbalanced_file_fail(broken_config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the grouped stage reports unmatched braces."""
    assert main([str(broken_config_path), "--stage", "groups", "--no-color"]) == 1
    assert "No matching closing brace" in capsys.readouterr().err


def test_parse_error_exit_code(broken_config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that a parse error exits with status 1."""
    assert main([str(broken_config_path), "--no-color"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Configuration error" in captured.err


def test_check(config_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test the --check summary."""
    assert main([str(config_path), "--check"]) == 0

    out = capsys.readouterr().out
    assert "Top-level directives: 2" in out
    assert "Total directives: 8" in out
    assert "Nesting depth: 3" in out


def test_check_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --check on a missing file."""
    assert main([str(tmp_path / "missing.conf"), "--check"]) == 1
    assert "not found" in capsys.readouterr().err


def test_max_depth_option(tmp_path: Path) -> None:
    """Test that --max-depth limits nesting and 0 disables the limit."""
    path = tmp_path / "deep.conf"
    path.write_text("a { b { c; } }")

    assert main([str(path), "--max-depth", "1", "-q"]) == 1
    assert main([str(path), "--max-depth", "0", "-q"]) == 0


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the --version flag."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_unlimited_depth_on_very_deep_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that --max-depth 0 reports stack exhaustion as a configuration error."""
    path = tmp_path / "deep.conf"
    path.write_text("a {" * 5000 + "}" * 5000)

    assert main([str(path), "--max-depth", "0", "-q"]) == 1
    assert "nested deeper than the interpreter allows" in capsys.readouterr().err
