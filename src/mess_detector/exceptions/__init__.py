"""Exception hierarchy for Legacy Mess Detector."""

from .analysis import AnalysisError, FileAccessError, PathNotFoundError
from .base import MessDetectorError
from .config import ConfigurationError, InvalidConfigError, InvalidPatternError

__all__ = [
    "MessDetectorError",
    "AnalysisError",
    "FileAccessError",
    "PathNotFoundError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPatternError",
]
