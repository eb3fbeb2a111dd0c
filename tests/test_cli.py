"""Tests for the CLI module."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from schemacheck import __version__
from schemacheck.cli.cli import cli

SCHEMA_MODULE = '''
from schemacheck import Case, Integer, Optional, Record, String

SERVER = Record(
    {
        "name": String,
        "port": Integer,
        "protocol": Optional(String),
        "tls": Case("protocol", ("https", True), (None, Optional(False))),
    }
)
'''


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def schema_ref(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable schema module and return its reference."""
    (tmp_path / "cli_test_schemas.py").write_text(SCHEMA_MODULE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_test_schemas:SERVER"


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data))
    return path


def test_version(runner: CliRunner) -> None:
    """Test the version option."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_valid_document(runner: CliRunner, tmp_path: Path, schema_ref: str) -> None:
    """Test that a valid document exits cleanly."""
    doc = write_json(tmp_path / "ok.json", {"name": "web", "port": 80})
    result = runner.invoke(cli, ["check", str(doc), "--schema", schema_ref])
    assert result.exit_code == 0
    assert "ok.json is valid." in result.output


def test_check_invalid_document(runner: CliRunner, tmp_path: Path, schema_ref: str) -> None:
    """Test that errors are printed and the exit status is 1."""
    doc = write_json(tmp_path / "bad.json", {"name": "web", "port": 80.5, "protocol": "https", "tls": False})
    result = runner.invoke(cli, ["check", str(doc), "--schema", schema_ref])
    assert result.exit_code == 1
    assert "bad.json is invalid:" in result.output
    assert "  Invalid value: 'port' must be an integral number" in result.output
    assert "  Case failed: condition 1 of 'protocol' holds but the consequence does not" in result.output
    assert "    Invalid value: 'tls' should be True" in result.output


def test_check_indent_option(runner: CliRunner, tmp_path: Path, schema_ref: str) -> None:
    """Test the indentation option."""
    doc = write_json(tmp_path / "bad.json", {"name": "web", "port": 1, "protocol": "https"})
    result = runner.invoke(cli, ["check", str(doc), "--schema", schema_ref, "--indent", "4"])
    assert result.exit_code == 1
    assert "      Invalid value: 'tls' should be True" in result.output


def test_check_schema_from_environment(runner: CliRunner, tmp_path: Path, schema_ref: str) -> None:
    """Test that the schema reference can come from the environment."""
    doc = write_json(tmp_path / "ok.json", {"name": "web", "port": 80})
    result = runner.invoke(cli, ["check", str(doc)], env={"SCHEMACHECK_SCHEMA": schema_ref})
    assert result.exit_code == 0


def test_check_multiple_documents(runner: CliRunner, tmp_path: Path, schema_ref: str) -> None:
    """Test mixed results across several documents."""
    good = write_json(tmp_path / "good.json", {"name": "a", "port": 1})
    bad = write_json(tmp_path / "bad.json", {"name": 1, "port": 1})
    result = runner.invoke(cli, ["check", str(good), str(bad), "--schema", schema_ref])
    assert result.exit_code == 1
    assert "good.json is valid." in result.output
    assert "bad.json is invalid:" in result.output


def test_check_unloadable_document(runner: CliRunner, tmp_path: Path, schema_ref: str) -> None:
    """Test that load errors exit with status 2."""
    result = runner.invoke(cli, ["check", str(tmp_path / "missing.json"), "--schema", schema_ref])
    assert result.exit_code == 2
    assert "Document not found" in result.output


def test_check_bad_schema_reference(runner: CliRunner, tmp_path: Path) -> None:
    """Test that an unknown schema reference exits with status 2."""
    doc = write_json(tmp_path / "ok.json", {})
    result = runner.invoke(cli, ["check", str(doc), "--schema", "schemacheck.combinators:Nope"])
    assert result.exit_code == 2


def test_debug_flag(runner: CliRunner, tmp_path: Path) -> None:
    """Test that debug mode is announced."""
    doc = write_json(tmp_path / "n.json", 3)
    result = runner.invoke(cli, ["--debug", "check", str(doc), "--schema", "schemacheck.combinators:Number"])
    assert result.exit_code == 0
    assert "Debug mode enabled" in result.output
