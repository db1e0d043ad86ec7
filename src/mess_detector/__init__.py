"""
Legacy Mess Detector - multi-language code quality analyzer

Classifies source files by language, extracts functions with lightweight
line-oriented parsing, scores them on seven weighted metrics and
aggregates the result over a whole tree. Scores run from 0.0 (clean)
to 1.0 (mess).
"""

__version__ = "0.1.0"

from .analysis import AnalysisResult, CodeAnalyzer, FileAnalysisResult, FileFailure
from .config import AnalysisConfig, load_config
from .languages import LanguageTag, classify
from .models import FunctionUnit, UnitModel

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "CodeAnalyzer",
    "FileAnalysisResult",
    "FileFailure",
    "FunctionUnit",
    "LanguageTag",
    "UnitModel",
    "classify",
    "load_config",
]
