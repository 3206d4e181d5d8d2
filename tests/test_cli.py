"""Tests for the pace CLI."""

import json

import pytest
from typer.testing import CliRunner

from src.cli import __version__
from src.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_settings(clean_settings):
    """Isolate CLI runs from local configuration."""
    clean_settings.setenv("LOG_LEVEL", "WARNING")


@pytest.fixture
def samples_file(tmp_path):
    """Recorded samples covering single readings, ticks and statistics."""
    path = tmp_path / "samples.json"
    path.write_text(
        json.dumps(
            [
                {"kind": "heart_rate", "value": 152},
                {"kind": "average_heart_rate", "value": 148},
                {"kind": "speed", "value": 3.0},
                [{"kind": "stride_length", "value": 1.0}, {"kind": "speed", "value": 4.0}],
                {"quantityType": "distance_walking_running", "sum": 5234.0},
            ]
        )
    )
    return path


def test_version():
    """Test the version flag."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_invalid_log_level_exits_with_error(clean_settings):
    """Test that a bad LOG_LEVEL is reported instead of crashing."""
    clean_settings.setenv("LOG_LEVEL", "verbose")

    result = runner.invoke(app, ["smooth", "10"])

    assert result.exit_code == 1
    assert "Invalid settings" in result.stdout


def test_smooth_json_sma():
    """Test smoothing readings with a simple moving average."""
    result = runner.invoke(
        app, ["smooth", "10", "20", "30", "40", "--method", "sma", "--buffer-size", "3", "--json"]
    )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["method"] == "sma"
    assert data["raw"] == [10, 20, 30, 40]
    assert data["smoothed"] == [10, 15, 20, 30]


def test_smooth_json_ema():
    """Test smoothing readings with an exponential moving average."""
    result = runner.invoke(app, ["smooth", "10", "20", "30", "--alpha", "0.5", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["smoothed"] == [10, 15, 22.5]


def test_smooth_table_output():
    """Test the table rendering."""
    result = runner.invoke(app, ["smooth", "10", "20", "--method", "sma"])

    assert result.exit_code == 0
    assert "Smoothed Pace" in result.stdout
    assert "15.000" in result.stdout


def test_smooth_invalid_configuration_exits_with_error():
    """Test that an invalid alpha is reported."""
    result = runner.invoke(app, ["smooth", "10", "--method", "ema", "--alpha", "0"])

    assert result.exit_code == 1
    assert "alpha must be in" in result.stdout


def test_replay_json(samples_file):
    """Test replaying samples through the pipeline."""
    result = runner.invoke(app, ["replay", str(samples_file), "--method", "sma", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["values"]["heart_rate"] == 152
    assert data["values"]["current_pace"] == 3.5
    assert data["values"]["cadence"] == 210
    assert data["formatted"]["heart_rate"] == "152bpm"
    assert data["formatted"]["distance"] == "5.23 km"


def test_replay_cycling_uses_rpm(samples_file):
    """Test the activity option."""
    result = runner.invoke(
        app, ["replay", str(samples_file), "--activity", "cycling", "--json"]
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)["formatted"]["cadence"].endswith("rpm")


def test_replay_table_output(samples_file):
    """Test the metric page rendering."""
    result = runner.invoke(app, ["replay", str(samples_file)])

    assert result.exit_code == 0
    assert "Run" in result.stdout
    assert "148bpm" in result.stdout


def test_replay_invalid_sample(tmp_path):
    """Test that malformed samples are reported."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"kind": "power", "value": 250}]))

    result = runner.invoke(app, ["replay", str(path)])

    assert result.exit_code == 1
    assert "Invalid sample" in result.stdout


def test_replay_invalid_json(tmp_path):
    """Test that unreadable files are reported."""
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    result = runner.invoke(app, ["replay", str(path)])

    assert result.exit_code == 1
    assert "Invalid JSON" in result.stdout


def test_replay_requires_array(tmp_path):
    """Test that the file must hold a list of entries."""
    path = tmp_path / "object.json"
    path.write_text(json.dumps({"kind": "speed", "value": 3.0}))

    result = runner.invoke(app, ["replay", str(path)])

    assert result.exit_code == 1
    assert "Expected a JSON array" in result.stdout
