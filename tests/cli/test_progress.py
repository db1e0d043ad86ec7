"""Tests for the analysis progress bar."""

from io import StringIO

from rich.console import Console

from mess_detector.cli.progress import AnalysisProgress


class TestAnalysisProgress:
    def test_disabled_is_a_no_op(self):
        with AnalysisProgress(enabled=False) as progress:
            progress(1, 2)
            assert progress._progress is None

    def test_enabled_tracks_counts(self):
        console = Console(file=StringIO(), force_terminal=False)
        with AnalysisProgress(console) as progress:
            progress(2, 5)
            task = progress._progress.tasks[0]
            assert (task.completed, task.total) == (2, 5)
        assert progress._progress is None
