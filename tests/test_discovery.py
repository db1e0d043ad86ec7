"""Tests for file discovery and glob matching."""

import re

import pytest

from mess_detector.discovery import (
    FileFinder,
    compile_globs,
    find_source_files,
    read_source,
    translate_glob,
    validate_pattern,
)
from mess_detector.exceptions import FileAccessError, InvalidPatternError, PathNotFoundError


def matches(pattern, path):
    return re.match(translate_glob(pattern), path) is not None


class TestGlobTranslation:
    """``**``-aware glob to regex."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("node_modules", True),
            ("node_modules/a.js", True),
            ("x/y/node_modules/a.js", True),
            ("x/node_modulesx/a.js", False),
        ],
    )
    def test_double_star_directory(self, path, expected):
        assert matches("**/node_modules/**", path) is expected

    def test_single_star_stays_in_directory(self):
        assert matches("*.py", "a.py")
        assert not matches("*.py", "pkg/a.py")

    def test_leading_double_star_matches_root(self):
        assert matches("**/*.min.js", "app.min.js")
        assert matches("**/*.min.js", "static/app.min.js")

    def test_brace_alternation(self):
        assert matches("**/index.{js,ts}", "src/index.ts")
        assert matches("**/index.{js,ts}", "index.js")
        assert not matches("**/index.{js,ts}", "src/index.jsx")

    def test_question_mark_and_classes(self):
        assert matches("src/?.go", "src/a.go")
        assert not matches("src/?.go", "src/ab.go")
        assert matches("src/[!t]*.py", "src/main.py")
        assert not matches("src/[!t]*.py", "src/test_main.py")

    def test_literal_dots_escaped(self):
        assert not matches("*.py", "apy")

    @pytest.mark.parametrize("pattern", ["", "   ", "src/[ab", "{a,b", "a]"])
    def test_invalid_patterns(self, pattern):
        with pytest.raises(InvalidPatternError):
            validate_pattern(pattern)

    def test_compile_globs_reports_pattern(self):
        with pytest.raises(InvalidPatternError, match="Invalid file pattern"):
            compile_globs(["**/*.py", "src/[x"])


class TestFileFinder:
    def test_finds_supported_files_sorted(self, sample_tree):
        found = FileFinder(sample_tree).find()
        relative = [p.relative_to(sample_tree).as_posix() for p in found]
        assert relative == ["cmd/server.go", "src/orders.py", "src/web/cart.js"]

    def test_include_patterns(self, sample_tree):
        found = FileFinder(sample_tree, include_patterns=["src/**"]).find()
        assert [p.name for p in found] == ["orders.py", "cart.js"]

    def test_exclude_patterns_prune_directories(self, sample_tree):
        found = FileFinder(sample_tree, exclude_patterns=["**/web/**"]).find()
        names = [p.name for p in found]
        assert "cart.js" not in names
        # An explicit exclude list replaces the defaults
        assert "index.js" in names

    def test_size_bounds(self, sample_tree):
        (sample_tree / "tiny.py").write_text("def f():\n    pass\n")
        found = find_source_files(sample_tree, max_file_size=50)
        assert [p.name for p in found] == ["tiny.py"]

    def test_min_size_zero_keeps_empty_files(self, sample_tree):
        found = find_source_files(sample_tree, min_file_size=0)
        assert "empty.py" in [p.name for p in found]

    def test_single_file_root(self, single_file):
        assert FileFinder(single_file).find() == [single_file]

    def test_unsupported_single_file(self, tmp_path):
        notes = tmp_path / "notes.txt"
        notes.write_text("hello")
        assert FileFinder(notes).find() == []

    def test_missing_root(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            FileFinder(tmp_path / "nope").find()


class TestReadSource:
    def test_invalid_utf8_replaced(self, tmp_path):
        path = tmp_path / "latin.py"
        path.write_bytes(b"# caf\xe9\ndef f():\n    pass\n")
        content = read_source(path)
        assert "�" in content
        assert "def f():" in content

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileAccessError) as exc_info:
            read_source(tmp_path / "gone.py")
        assert exc_info.value.reason.startswith("OS error")
