"""Tests for the analyze command."""

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from mess_detector import __version__
from mess_detector.cli import app
from mess_detector.cli._common import resolve_config

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_config_files(tmp_path, monkeypatch):
    """Keep ~/.mess-detector.toml and ./mess-detector.toml out of the runs."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)


class TestAnalyzeCommand:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_terminal_report(self, sample_tree):
        result = runner.invoke(app, [str(sample_tree)])
        assert result.exit_code == 0
        assert "Mess score" in result.output
        assert "Worst files" in result.output

    def test_summary(self, sample_tree):
        result = runner.invoke(app, [str(sample_tree), "--summary"])
        assert result.exit_code == 0
        assert "Worst files" not in result.output

    def test_json(self, sample_tree):
        result = runner.invoke(app, [str(sample_tree), "--json", "--workers", "2"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["total_files"] == 3
        assert 0.0 <= data["code_quality_score"] <= 1.0

    def test_exclude(self, sample_tree):
        result = runner.invoke(app, [str(sample_tree), "--json", "--exclude", "**/cmd/**"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["total_files"] == 2

    def test_markdown(self, sample_tree):
        result = runner.invoke(app, [str(sample_tree), "--markdown", "--top", "1"])
        assert result.exit_code == 0
        assert "# Legacy Mess Detector Report" in result.output
        assert "### 2." not in result.output

    def test_empty_directory(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, [str(empty)])
        assert result.exit_code == 0
        assert "No analyzable source files found." in result.output

    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "nowhere")])
        assert result.exit_code == 1
        assert "Cannot access path" in result.output

    def test_invalid_pattern(self, sample_tree):
        result = runner.invoke(app, [str(sample_tree), "--include", "src/[x"])
        assert result.exit_code == 1
        assert "Invalid file pattern" in result.output

    def test_workers_out_of_range(self, sample_tree):
        result = runner.invoke(app, [str(sample_tree), "--workers", "0"])
        assert result.exit_code == 2


class TestResolveConfig:
    def test_unset_options_stay_unset(self):
        config = resolve_config()
        assert config.workers is None
        assert config.include_patterns == []
        assert config.verbosity == "normal"

    def test_flags_applied(self):
        config = resolve_config(include=["src/**"], skip_index=True, workers=2, quiet=True)
        assert config.include_patterns == ["src/**"]
        assert config.skip_index is True
        assert config.workers == 2
        assert config.verbosity == "quiet"

    def test_quiet_run(self, sample_tree):
        result = runner.invoke(app, [str(sample_tree), "--quiet", "--json"])
        assert result.exit_code == 0


class TestVerbosity:
    """Logging follows the resolved config, not just the raw flags."""

    @pytest.fixture(autouse=True)
    def restore_package_logger(self):
        logger = logging.getLogger("mess_detector")
        saved = (logger.level, list(logger.handlers), logger.propagate)
        yield
        logger.setLevel(saved[0])
        logger.handlers[:] = saved[1]
        logger.propagate = saved[2]

    def test_verbosity_from_project_file(self, sample_tree):
        Path("mess-detector.toml").write_text('verbosity = "verbose"\n')
        result = runner.invoke(app, [str(sample_tree), "--json"])
        assert result.exit_code == 0
        assert logging.getLogger("mess_detector").level == logging.DEBUG

    def test_quiet_flag_beats_project_file(self, sample_tree):
        Path("mess-detector.toml").write_text('verbosity = "verbose"\n')
        result = runner.invoke(app, [str(sample_tree), "--json", "--quiet"])
        assert result.exit_code == 0
        assert logging.getLogger("mess_detector").level == logging.ERROR

    def test_default_level(self, sample_tree):
        result = runner.invoke(app, [str(sample_tree), "--json"])
        assert result.exit_code == 0
        assert logging.getLogger("mess_detector").level == logging.WARNING
