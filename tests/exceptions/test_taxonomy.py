"""Tests for the exception hierarchy."""

from pathlib import Path

import pytest

from mess_detector.exceptions import (
    AnalysisError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidPatternError,
    MessDetectorError,
    PathNotFoundError,
)


class TestHierarchy:
    """Every error is catchable as MessDetectorError."""

    @pytest.mark.parametrize(
        "error,parent",
        [
            (PathNotFoundError(Path("x")), AnalysisError),
            (FileAccessError(Path("x"), "denied"), AnalysisError),
            (InvalidPatternError("[", "unmatched '['"), ConfigurationError),
            (InvalidConfigError("workers", 0, "must be at least 1"), ConfigurationError),
        ],
    )
    def test_parents(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, MessDetectorError)


class TestMessages:
    def test_details_appended(self):
        error = FileAccessError(Path("src/a.py"), "permission denied")
        assert str(error) == "Cannot access file: src/a.py (filepath=src/a.py, reason=permission denied)"
        assert error.reason == "permission denied"

    def test_plain_message(self):
        assert str(MessDetectorError("boom")) == "boom"

    def test_path_not_found_keeps_path(self):
        error = PathNotFoundError(Path("missing"))
        assert error.path == Path("missing")
        assert error.details == {"path": "missing"}

    def test_invalid_config_fields(self):
        error = InvalidConfigError("workers", 0, "must be at least 1")
        assert (error.key, error.value, error.reason) == ("workers", 0, "must be at least 1")
        assert "Invalid configuration for workers: 0" in str(error)

    def test_invalid_pattern_message(self):
        error = InvalidPatternError("src/[x", "unmatched '['")
        assert str(error).startswith("Invalid file pattern: 'src/[x'")
