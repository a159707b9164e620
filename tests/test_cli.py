r"""
Tests for vajra.cli module.
"""

import json
import logging
import sys

import pytest
from typer.testing import CliRunner

from vajra.cli import app
from vajra.config import ENV_PREFIX

runner = CliRunner()

# Quoted so an interpreter path containing spaces stays one argument
PYTHON = f'"{sys.executable}"'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("WARMUP", "ITERATIONS", "OUTPUT"):
        monkeypatch.delenv(f"{ENV_PREFIX}{key}", raising=False)


@pytest.fixture
def restore_logging():
    logger = logging.getLogger("vajra")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


class TestJsonOutput:
    def test_json_document(self):
        result = runner.invoke(app, ["-w", "0", "-n", "3", "-o", "json", PYTHON, "-c", "pass"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert set(data) == {"command", "mean_ms", "std_dev_ms", "min_ms", "max_ms", "ops_per_sec", "iterations"}
        assert data["iterations"] == 3
        assert data["mean_ms"] > 0
        assert data["min_ms"] <= data["mean_ms"] <= data["max_ms"]

    def test_warmup_keeps_json_clean(self):
        result = runner.invoke(app, ["-w", "1", "-n", "1", "-o", "json", PYTHON, "-c", "pass"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["iterations"] == 1

    def test_failing_command_still_reports(self):
        result = runner.invoke(
            app, ["--warmup", "0", "--iterations", "2", "--output", "json", PYTHON, "-c", '"raise SystemExit(2)"']
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["iterations"] == 2

    def test_save(self, tmp_path):
        path = tmp_path / "out.json"
        result = runner.invoke(app, ["-w", "0", "-n", "1", "-o", "json", "--save", str(path), PYTHON, "-c", "pass"])

        assert result.exit_code == 0, result.output
        assert json.loads(path.read_text())["iterations"] == 1


class TestTextOutput:
    def test_text_summary(self):
        result = runner.invoke(app, ["-w", "1", "-n", "2", "--no-color", "--no-progress", PYTHON, "-c", "pass"])

        assert result.exit_code == 0, result.output
        assert "Running benchmark:" in result.output
        assert "Warmup: 1 | Iterations: 2" in result.output
        assert "Warming up (1 runs)..." in result.output
        assert "(mean)" in result.output
        assert "(2 iters)" in result.output

    def test_command_options_passed_through(self):
        # -n after the command belongs to the command, not to vajra
        result = runner.invoke(
            app, ["-w", "0", "-n", "1", "--no-color", "--no-progress", PYTHON, "-c", "pass", "-n"]
        )

        assert result.exit_code == 0, result.output
        assert "(1 iters)" in result.output
        assert "Warming up" not in result.output

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell")
    def test_shell_mode(self):
        result = runner.invoke(app, ["-w", "0", "-n", "2", "--shell", "--no-progress", "exit 0 | cat"])

        assert result.exit_code == 0, result.output
        assert "(2 iters)" in result.output

    def test_env_defaults(self, monkeypatch):
        monkeypatch.setenv(f"{ENV_PREFIX}WARMUP", "0")
        monkeypatch.setenv(f"{ENV_PREFIX}ITERATIONS", "2")

        result = runner.invoke(app, ["--no-color", "--no-progress", PYTHON, "-c", "pass"])

        assert result.exit_code == 0, result.output
        assert "Warmup: 0 | Iterations: 2" in result.output


class TestErrors:
    def test_no_arguments_shows_help(self):
        result = runner.invoke(app, [])
        assert "Usage" in result.output

    def test_missing_command(self):
        result = runner.invoke(app, ["--iterations", "3"])
        assert result.exit_code == 1
        assert "No command specified" in result.output

    def test_non_numeric_iterations(self):
        result = runner.invoke(app, ["--iterations", "many", "ls"])
        assert result.exit_code == 1
        assert "Invalid integer value for --iterations" in result.output

    def test_negative_warmup(self):
        result = runner.invoke(app, ["--warmup", "-1", "ls"])
        assert result.exit_code == 1
        assert "--warmup must be non-negative" in result.output

    def test_unknown_output(self):
        result = runner.invoke(app, ["--output", "xml", "ls"])
        assert result.exit_code == 1
        assert "--output must be one of" in result.output

    def test_non_numeric_timeout(self):
        result = runner.invoke(app, ["--timeout", "abc", "ls"])
        assert result.exit_code == 1
        assert "Invalid value for --timeout" in result.output

    def test_non_positive_timeout(self):
        result = runner.invoke(app, ["--timeout", "0", "ls"])
        assert result.exit_code == 1
        assert "--timeout must be positive" in result.output

    def test_unknown_policy(self):
        result = runner.invoke(app, ["--on-spawn-failure", "retry", "ls"])
        assert result.exit_code == 1

    def test_abort_on_spawn_failure(self):
        result = runner.invoke(
            app, ["-w", "0", "-n", "3", "-o", "json", "--on-spawn-failure", "abort", "vajra-no-such-program-xyz"]
        )
        assert result.exit_code == 1
        assert "Failed to start" in result.output

    def test_spawn_failure_included_by_default(self):
        result = runner.invoke(app, ["-w", "0", "-n", "2", "-o", "json", "vajra-no-such-program-xyz"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["iterations"] == 2


class TestVerbose:
    def test_verbose_logs_run(self, restore_logging):
        result = runner.invoke(app, ["-v", "-w", "0", "-n", "2", "--no-color", "--no-progress", PYTHON, "-c", "pass"])

        assert result.exit_code == 0, result.output
        assert "(2 iters)" in result.output
        assert any(isinstance(h, logging.StreamHandler) for h in logging.getLogger("vajra").handlers)
