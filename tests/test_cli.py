"""Tests for the obit command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from obituary_parser import __version__
from obituary_parser.cli.main import app

from tests.conftest import SCENARIO_A, SCENARIO_C

runner = CliRunner()


@pytest.fixture
def obituaries(tmp_path):
    folder = tmp_path / "obituaries"
    folder.mkdir()
    (folder / "a.txt").write_text(SCENARIO_A, encoding="utf-8")
    (folder / "c.txt").write_text(SCENARIO_C, encoding="utf-8")
    return folder


class TestParse:
    def test_json_output(self, obituaries) -> None:
        result = runner.invoke(app, ["parse", str(obituaries / "a.txt"), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        record = data[str(obituaries / "a.txt")]
        assert record["spouse"][0]["name"] == "Paul"
        assert [child["name"] for child in record["children"]] == ["Anna", "Lucy"]

    def test_recursive(self, obituaries) -> None:
        result = runner.invoke(app, ["parse", str(obituaries), "--recursive", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data[str(obituaries / "c.txt")] is None
        assert data[str(obituaries / "a.txt")] is not None

    def test_table_output(self, obituaries) -> None:
        result = runner.invoke(app, ["parse", str(obituaries / "a.txt"), str(obituaries / "c.txt")])
        assert result.exit_code == 0
        assert "Anna" in result.stdout
        assert "no family information found" in result.stdout

    def test_quick(self, obituaries) -> None:
        result = runner.invoke(app, ["parse", str(obituaries / "a.txt"), "--quick", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data[str(obituaries / "a.txt")]["children"] == ["Anna", "Lucy"]

    def test_invalid_file_skipped(self, obituaries) -> None:
        (obituaries / "empty.txt").write_text("", encoding="utf-8")
        result = runner.invoke(
            app, ["parse", str(obituaries / "empty.txt"), str(obituaries / "a.txt")]
        )
        assert result.exit_code == 0
        assert "Error processing" in result.stdout
        assert "Anna" in result.stdout

    def test_quick_rejects_invalid_file(self, obituaries) -> None:
        (obituaries / "empty.txt").write_text("", encoding="utf-8")
        result = runner.invoke(
            app, ["parse", str(obituaries / "empty.txt"), "--quick", "--json"]
        )
        assert result.exit_code == 0
        assert "Error processing" in result.stdout

    def test_directory_without_recursive(self, obituaries) -> None:
        result = runner.invoke(app, ["parse", str(obituaries)])
        assert result.exit_code == 1
        assert "No files found" in result.stdout


class TestCacheStats:
    def test_empty_cache(self, tmp_path) -> None:
        result = runner.invoke(app, ["cache-stats", "--cache-db", str(tmp_path / "geo.db")])
        assert result.exit_code == 0
        assert "Cached Places" in result.stdout


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
