"""Data models shared by the extractors and the metric engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .languages import LanguageTag

# Canonical metric order. Every per-file metric mapping holds exactly these keys.
METRIC_NAMES: Tuple[str, ...] = (
    "cyclomatic_complexity",
    "function_length",
    "comment_ratio",
    "error_handling",
    "naming_convention",
    "code_duplication",
    "structure_analysis",
)


@dataclass(frozen=True)
class FunctionUnit:
    """A function, method, or pseudo-unit (CSS rule, HTML block).

    Lines are 1-based and inclusive.
    """

    name: str
    start_line: int
    end_line: int
    complexity: int = 1
    parameters: int = 0

    def __post_init__(self) -> None:
        if self.start_line < 1:
            raise ValueError(f"start_line must be >= 1, got {self.start_line}")
        if self.end_line < self.start_line:
            raise ValueError(
                f"end_line ({self.end_line}) must be >= start_line ({self.start_line})"
            )
        if self.complexity < 1:
            raise ValueError(f"complexity must be >= 1, got {self.complexity}")
        if self.parameters < 0:
            raise ValueError(f"parameters must be >= 0, got {self.parameters}")

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


@dataclass(frozen=True)
class UnitModel:
    """Normalized structure of one source file."""

    functions: Tuple[FunctionUnit, ...]
    comment_lines: int
    total_lines: int
    language: LanguageTag

    @property
    def is_degenerate(self) -> bool:
        """True when extraction found no units. Valid output, not an error."""
        return not self.functions
