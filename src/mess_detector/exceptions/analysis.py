"""Analysis-related exceptions: missing roots and unreadable files."""

from pathlib import Path

from .base import MessDetectorError


class AnalysisError(MessDetectorError):
    """Base class for analysis-related errors."""

    pass


class PathNotFoundError(AnalysisError):
    """Raised when the root path handed to the analyzer does not exist.

    Fatal: the run stops before any file is touched.
    """

    def __init__(self, path: Path):
        super().__init__(f"Cannot access path: {path}", details={"path": str(path)})
        self.path = path


class FileAccessError(AnalysisError):
    """Raised when a single file cannot be read.

    Per-file: the orchestrator records it as a failure and keeps going.
    """

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
