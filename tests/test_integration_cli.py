"""Integration tests for CLI functionality."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from interpolator_pkg import config
from interpolator_pkg.cli import _separate_points, main_entry

REPO_ROOT = Path(__file__).resolve().parent.parent


def run_cli(*args, env=None):
    full_env = dict(os.environ)
    if env:
        full_env.update(env)
    return subprocess.run(
        [sys.executable, "-m", "interpolator_pkg.cli", *args],
        capture_output=True,
        text=True,
        timeout=30,
        cwd=REPO_ROOT,
        env=full_env,
    )


def test_cli_version():
    """Test --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_help():
    result = run_cli("--help")
    assert result.returncode == 0
    assert "POINT" in result.stdout


def test_cli_health_check():
    """Test --health-check command."""
    result = run_cli("--health-check")
    assert result.returncode == 0
    assert "health check" in result.stdout.lower()
    assert "[FAIL]" not in result.stdout


def test_cli_three_points():
    result = run_cli("1,1/3", "2,2/3", "3,5/6")
    assert result.returncode == 0
    assert result.stdout.strip() == "-(1/12)x^2 + (7/12)x - 1/6"


def test_cli_single_point():
    result = run_cli("1,13")
    assert result.returncode == 0
    assert result.stdout.strip() == "13"


def test_cli_no_points():
    result = run_cli()
    assert result.returncode == 0
    assert result.stdout.strip() == "0"


def test_cli_negative_points_and_evaluation():
    result = run_cli("--at", "3", "--", "-2,0", "2,0", "0,-4")
    assert result.returncode == 0
    lines = result.stdout.strip().splitlines()
    assert lines == ["x^2 - 4", "P(3) = 5"]


def test_cli_negative_evaluation_point():
    result = run_cli("--at=-1/2", "1,1", "2,4", "3,9")
    assert result.returncode == 0
    assert "P(-0.5) = 0.25" in result.stdout


def test_cli_negative_points_without_separator():
    result = run_cli("-1,1", "0,0", "1,1")
    assert result.returncode == 0
    assert result.stdout.strip() == "x^2"


def test_cli_negative_values_mixed_with_options():
    result = run_cli("-2,0", "--at", "-1/2", "2,0", "-a", "3", "0,-4")
    assert result.returncode == 0
    lines = result.stdout.strip().splitlines()
    assert lines == ["x^2 - 4", "P(-0.5) = -3.75", "P(3) = 5"]


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["1,1", "2,4"], ["--", "1,1", "2,4"]),
        (["-1,1", "-v"], ["-v", "--", "-1,1"]),
        (["--at", "-1/2", "0,0"], ["--at=-1/2", "--", "0,0"]),
        (["-a", "3", "-1,1"], ["-a", "3", "--", "-1,1"]),
        (["--format", "json", "-1,1", "--", "-2,3"], ["--format", "json", "--", "-1,1", "-2,3"]),
        (["--health-check"], ["--health-check"]),
    ],
)
def test_separate_points(argv, expected):
    assert _separate_points(argv) == expected


def test_cli_json():
    result = run_cli("--format", "json", "1,1", "2,4")
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["ok"] is True
    assert data["polynomial"] == "3x - 2"
    assert data["degree"] == 1
    assert data["coefficients"] == ["-2", "3"]


def test_cli_latex():
    result = run_cli("--format", "latex", "--", "-2,0", "2,0", "0,-4")
    assert result.returncode == 0
    assert "x^{2}" in result.stdout


def test_cli_variable():
    result = run_cli("--variable", "t", "0,1", "1,3")
    assert result.returncode == 0
    assert result.stdout.strip() == "2t + 1"


def test_cli_invalid_variable():
    result = run_cli("--variable", "2x", "0,1")
    assert result.returncode == 1
    assert "Invalid variable name" in result.stderr


@pytest.mark.parametrize(
    "points, message",
    [
        (["1,0", "5,2", "5,20"], "Duplicate interpolation node x = 5"),
        (["1"], "Invalid point"),
        (["a,1"], "Invalid rational number"),
        (["1/0,1"], "Denominator can't be 0"),
    ],
)
def test_cli_errors(points, message):
    result = run_cli(*points)
    assert result.returncode == 1
    assert "Error:" in result.stderr
    assert message in result.stderr
    assert result.stdout == ""


def test_cli_json_error():
    result = run_cli("--format", "json", "1,0", "1,1")
    assert result.returncode == 1
    data = json.loads(result.stdout)
    assert data["ok"] is False
    assert data["error_code"] == "DUPLICATE_NODE"


def test_cli_max_points_from_environment():
    result = run_cli("1,1", "2,2", env={"INTERPOLATOR_MAX_POINTS": "1"})
    assert result.returncode == 1
    assert "Too many points" in result.stderr


def test_cli_max_points_flag():
    result = run_cli("--max-points", "2", "1,1", "2,2", "3,3")
    assert result.returncode == 1
    assert "Too many points" in result.stderr


def test_launcher_script():
    result = subprocess.run(
        [sys.executable, "interpolator.py", "1,1", "2,4", "3,9"],
        capture_output=True,
        text=True,
        timeout=30,
        cwd=REPO_ROOT,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "x^2"


class TestMainEntry:
    """Run main_entry in-process."""

    @pytest.fixture(autouse=True)
    def restore_config(self, monkeypatch):
        monkeypatch.setattr(config, "POLYNOMIAL_VARIABLE", config.POLYNOMIAL_VARIABLE)
        monkeypatch.setattr(config, "MAX_POINTS", config.MAX_POINTS)

    def test_success(self, capsys):
        assert main_entry(["--at", "4", "1,1", "2,4", "3,9"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["x^2", "P(4) = 16"]

    def test_failure(self, capsys):
        assert main_entry(["1,1", "1,2"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Duplicate interpolation node x = 1")

    def test_variable_override(self, capsys):
        assert main_entry(["--variable", "y", "0,0", "1,1", "2,4"]) == 0
        assert capsys.readouterr().out.strip() == "y^2"
