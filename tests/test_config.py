"""Tests for configuration loading and validation."""

import os

import pytest

from mess_detector.config import (
    DEFAULT_EXCLUDES,
    INDEX_EXCLUDES,
    AnalysisConfig,
    DuplicationThresholds,
    load_config,
)
from mess_detector.exceptions import InvalidConfigError, MessDetectorError


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """No global or project config files, no MESS_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for key in list(os.environ):
        if key.startswith("MESS_"):
            monkeypatch.delenv(key)
    return project


class TestAnalysisConfig:
    """Defaults and validation."""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.parallel is True
        assert config.workers is None
        assert config.max_file_size_bytes == 10 * 1024 * 1024
        assert config.effective_exclude_patterns == list(DEFAULT_EXCLUDES)

    def test_effective_excludes(self):
        config = AnalysisConfig(exclude_patterns=["**/fixtures/**"], skip_index=True)
        patterns = config.effective_exclude_patterns
        assert patterns[: len(DEFAULT_EXCLUDES)] == list(DEFAULT_EXCLUDES)
        assert "**/fixtures/**" in patterns
        assert patterns[-len(INDEX_EXCLUDES) :] == list(INDEX_EXCLUDES)

    def test_without_default_excludes(self):
        config = AnalysisConfig(use_default_excludes=False, exclude_patterns=["a/**"])
        assert config.effective_exclude_patterns == ["a/**"]

    @pytest.mark.parametrize(
        "kwargs,key",
        [
            ({"workers": 0}, "workers"),
            ({"max_file_size_mb": 0}, "max_file_size_mb"),
            ({"min_file_size_bytes": -1}, "min_file_size_bytes"),
            ({"metric_weights": {"bogus": 1.0}}, "metric_weights"),
            ({"metric_weights": {"comment_ratio": 0}}, "metric_weights.comment_ratio"),
            ({"verbosity": "loud"}, "verbosity"),
        ],
    )
    def test_invalid_values(self, kwargs, key):
        with pytest.raises(InvalidConfigError) as exc_info:
            AnalysisConfig(**kwargs)
        assert exc_info.value.key == key


class TestDuplicationThresholds:
    def test_defaults(self):
        t = DuplicationThresholds()
        assert (t.highly_similar, t.moderately_similar, t.naming_group_min) == (0.7, 0.5, 2)

    def test_moderate_above_high_rejected(self):
        with pytest.raises(InvalidConfigError, match="moderately_similar"):
            DuplicationThresholds(moderately_similar=0.9)

    def test_score_weights_must_sum_to_one(self):
        with pytest.raises(InvalidConfigError):
            DuplicationThresholds(line_ratio_weight=0.5, group_penalty_weight=0.6)


class TestLoadConfig:
    def test_no_sources(self, isolated):
        assert load_config() == AnalysisConfig()

    def test_none_overrides_ignored(self, isolated):
        config = load_config(workers=None, include_patterns=None)
        assert config.workers is None
        assert config.include_patterns == []

    def test_verbose_flag(self, isolated):
        assert load_config(verbose=True).verbosity == "verbose"

    def test_project_file(self, isolated):
        (isolated / "mess-detector.toml").write_text(
            "workers = 3\n"
            'exclude_patterns = ["**/legacy/**"]\n'
            "\n"
            "[metric_weights]\n"
            "comment_ratio = 0.25\n"
            "\n"
            "[duplication]\n"
            "highly_similar = 0.8\n"
        )
        config = load_config()
        assert config.workers == 3
        assert config.exclude_patterns == ["**/legacy/**"]
        assert config.metric_weights == {"comment_ratio": 0.25}
        assert config.duplication.highly_similar == 0.8

    def test_explicit_file_beats_project_file(self, isolated, tmp_path):
        (isolated / "mess-detector.toml").write_text("workers = 3\n")
        explicit = tmp_path / "custom.toml"
        explicit.write_text("workers = 5\n")
        assert load_config(config_file=explicit).workers == 5

    def test_env_beats_file_and_cli_beats_env(self, isolated, monkeypatch):
        (isolated / "mess-detector.toml").write_text("workers = 3\n")
        monkeypatch.setenv("MESS_WORKERS", "6")
        monkeypatch.setenv("MESS_PARALLEL", "false")
        config = load_config()
        assert config.workers == 6
        assert config.parallel is False
        assert load_config(workers=2).workers == 2

    def test_bad_env_value(self, isolated, monkeypatch):
        monkeypatch.setenv("MESS_PARALLEL", "maybe")
        with pytest.raises(MessDetectorError, match="MESS_PARALLEL"):
            load_config()

    def test_missing_explicit_file(self, isolated, tmp_path):
        with pytest.raises(MessDetectorError, match="Config file not found"):
            load_config(config_file=tmp_path / "absent.toml")

    def test_malformed_toml(self, isolated):
        (isolated / "mess-detector.toml").write_text("workers = [\n")
        with pytest.raises(MessDetectorError, match="Invalid project config"):
            load_config()

    def test_unknown_key(self, isolated):
        (isolated / "mess-detector.toml").write_text("colour = 'red'\n")
        with pytest.raises(MessDetectorError, match="Invalid configuration"):
            load_config()

    def test_unknown_duplication_key(self, isolated):
        (isolated / "mess-detector.toml").write_text("[duplication]\nfuzz = 1\n")
        with pytest.raises(MessDetectorError, match="duplication"):
            load_config()
