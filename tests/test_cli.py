"""Tests for the asana-csv-import CLI."""

import json

import pytest
from click.testing import CliRunner

from asana_csv_import import __version__
from asana_csv_import.cli import main

from .fixtures import (
    LINK_BASE,
    create_export,
    create_full_record,
    create_record,
    create_untitled_record,
    write_csv,
)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def export_file(tmp_path):
    path = tmp_path / "export.csv"
    write_csv(path, [create_full_record(), create_untitled_record()])
    return path


class TestConvertCommand:
    """Tests for the convert command."""

    def test_convert_writes_default_output(self, runner, export_file):
        result = runner.invoke(main, ["convert", str(export_file), "--org-url", LINK_BASE])

        assert result.exit_code == 0, result.output
        output = export_file.with_name("export.import.json")
        assert output.exists()

        data = json.loads(output.read_text(encoding="utf-8"))
        assert [issue["title"] for issue in data["issues"]] == ["Fix bug"]
        assert data["issues"][0]["url"] == "https://app.asana.com/0/1/123"
        assert set(data["users"]) == {"a@x.com", "ghost@x.com"}
        assert "Issues: 1 (1 untitled skipped)" in result.output

    def test_convert_explicit_output(self, runner, export_file, tmp_path):
        output = tmp_path / "out" / "doc.json"

        result = runner.invoke(main, ["convert", str(export_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert output.exists()

    def test_org_url_from_environment(self, runner, export_file, tmp_path):
        output = tmp_path / "doc.json"

        result = runner.invoke(
            main,
            ["convert", str(export_file), "-o", str(output)],
            env={"ASANA_ORG_URL": "https://app.asana.com/0/9/"},
        )

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["issues"][0]["url"] == "https://app.asana.com/0/9/123"

    def test_without_org_url_links_omitted(self, runner, export_file, tmp_path):
        output = tmp_path / "doc.json"

        result = runner.invoke(
            main, ["convert", str(export_file), "-o", str(output)], env={"ASANA_ORG_URL": None}
        )

        assert result.exit_code == 0, result.output
        assert "back-links omitted" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert "url" not in data["issues"][0]

    def test_compact_output(self, runner, export_file, tmp_path):
        output = tmp_path / "doc.json"

        result = runner.invoke(main, ["convert", str(export_file), "-o", str(output), "--compact"])

        assert result.exit_code == 0, result.output
        assert "\n" not in output.read_text(encoding="utf-8")

    def test_dry_run_writes_nothing(self, runner, export_file):
        result = runner.invoke(main, ["convert", str(export_file), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "Dry run complete" in result.output
        assert not export_file.with_name("export.import.json").exists()

    def test_no_markup_keeps_notes(self, runner, tmp_path):
        path = tmp_path / "export.csv"
        write_csv(path, [create_record(Task_ID="1", Name="t", Notes="h1. Title")])
        output = tmp_path / "doc.json"

        result = runner.invoke(main, ["convert", str(path), "-o", str(output), "--no-markup"])

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["issues"][0]["description"] == "h1. Title"

    def test_status_from_completion(self, runner, tmp_path):
        path = tmp_path / "export.csv"
        write_csv(path, [create_record(Task_ID="1", Name="t", Section="Done")])
        output = tmp_path / "doc.json"

        result = runner.invoke(
            main, ["convert", str(path), "-o", str(output), "--status-from", "completion"]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["issues"][0]["status"] == "Todo"

    def test_warnings_reported(self, runner, tmp_path):
        path = tmp_path / "export.csv"
        write_csv(path, [create_record(Task_ID="7", Name="t", Due_Date="someday")])

        result = runner.invoke(main, ["convert", str(path), "--dry-run"])

        assert result.exit_code == 0
        assert "Task 7: Unparseable due date" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["convert", str(tmp_path / "missing.csv")])

        assert result.exit_code != 0

    def test_empty_file_fails(self, runner, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")

        result = runner.invoke(main, ["convert", str(path)])

        assert result.exit_code == 1
        assert "Error reading export" in result.output


class TestSummaryCommand:
    def test_summary(self, runner, tmp_path):
        path = tmp_path / "export.csv"
        write_csv(path, create_export(count=6))

        result = runner.invoke(main, ["summary", str(path)])

        assert result.exit_code == 0, result.output
        assert "Issues: 6" in result.output
        assert "Users: 2" in result.output
        assert "Labels: 2" in result.output
        assert "Backlog: 1" in result.output
        assert "In Testing: 1" in result.output
        assert not list(tmp_path.glob("*.json"))


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
