"""
Tests for the command-line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from hoursparser.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every command away from any local hoursparser.yaml."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _json_lines(output):
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_parse_argument_prints_json():
    """A single argument should print one JSON schedule."""
    result = runner.invoke(app, ["parse", "--quiet", "Mon-Fri 9AM-5PM"])

    assert result.exit_code == 0
    schedules = _json_lines(result.stdout)
    assert len(schedules) == 1
    assert schedules[0]["monday"] == ["9:00 AM - 5:00 PM"]
    assert schedules[0]["sunday"] == []


def test_parse_reads_stdin():
    """Lines from stdin should each produce a schedule."""
    result = runner.invoke(app, ["parse", "-q"], input="Sat, Sun 10-2\n\nMon closed\n")

    assert result.exit_code == 0
    schedules = _json_lines(result.stdout)
    assert len(schedules) == 2
    assert schedules[0]["sunday"] == ["10:00 - 2:00"]
    assert schedules[1]["monday"] == []


def test_parse_on_date():
    """--on should print only the hours for that date's weekday."""
    result = runner.invoke(app, ["parse", "-q", "--on", "2024-11-23", "Sat 10-2"])

    assert result.exit_code == 0
    assert _json_lines(result.stdout) == [
        {"date": "2024-11-23", "day": "saturday", "hours": ["10:00 - 2:00"]}
    ]


def test_parse_table_format():
    """The table format should list every day."""
    result = runner.invoke(app, ["parse", "-q", "--format", "table", "Mon 9-5"])

    assert result.exit_code == 0
    assert "Monday" in result.stdout
    assert "9:00 - 5:00" in result.stdout
    assert "Sunday" in result.stdout


def test_parse_uses_config_file(isolated_cwd):
    """Settings from --config should apply."""
    config_path = isolated_cwd / "custom.yaml"
    config_path.write_text("output:\n  show_diagnostics: false\n  json_indent: 2\n", encoding="utf-8")

    result = runner.invoke(app, ["parse", "--config", str(config_path), "Tue 8-4"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["tuesday"] == ["8:00 - 4:00"]


def test_missing_config_file_exits_with_error(isolated_cwd):
    """An explicit config path that does not exist should fail."""
    result = runner.invoke(app, ["parse", "--config", str(isolated_cwd / "nope.yaml"), "Mon 9-5"])

    assert result.exit_code == 1


def test_invalid_date_exits_with_error():
    """A malformed --on date should fail."""
    result = runner.invoke(app, ["parse", "-q", "--on", "not-a-date", "Mon 9-5"])

    assert result.exit_code == 1


def test_tokens_command():
    """The tokens command should show each token with its kind."""
    result = runner.invoke(app, ["tokens", "Mon 9AM-5PM"])

    assert result.exit_code == 0
    assert "day" in result.stdout
    assert "9AM" in result.stdout
    assert "link" in result.stdout


def test_version_command():
    """The version command should print the package version."""
    from hoursparser import __version__

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
