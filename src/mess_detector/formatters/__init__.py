"""Output formatters for Legacy Mess Detector."""

from .base import BaseFormatter, ReportOptions
from .json_formatter import JsonFormatter
from .markdown_formatter import MarkdownFormatter
from .rich_formatter import RichFormatter
from .wording import advice, describe_issue, quality_level


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "markdown", "json"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "markdown": MarkdownFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "MarkdownFormatter",
    "ReportOptions",
    "RichFormatter",
    "advice",
    "describe_issue",
    "get_formatter",
    "quality_level",
]
